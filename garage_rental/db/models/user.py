# garage_rental/db/models/user.py
from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from garage_rental.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    # non-login customers created by an admin have no password
    password_hash = Column(String, nullable=True)
    role = Column(String, nullable=False, default="user", server_default="user")

    phone = Column(String, nullable=True)
    category = Column(String, nullable=True)  # "non-login" for admin-created customers

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bookings = relationship("Booking", back_populates="user", lazy="selectin")
    reviews = relationship("Review", back_populates="user", lazy="selectin")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
