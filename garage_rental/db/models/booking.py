# garage_rental/db/models/booking.py
from sqlalchemy import Column, Integer, String, ForeignKey, Date, Float, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from garage_rental.db.base import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("end_date >= start_date"),
    )

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    garage_id = Column(Integer, ForeignKey("garages.id"), nullable=False, index=True)

    # inclusive range
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    status = Column(String, nullable=False, default="pending")
    # fixed at creation, never recomputed
    total_price = Column(Float, nullable=False)
    removed_reason = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # relationships
    user = relationship("User", back_populates="bookings")
    garage = relationship("Garage", back_populates="bookings")
