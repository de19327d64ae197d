# garage_rental/db/models/garage.py

from sqlalchemy import Column, DateTime, Integer, String, Boolean, Float, JSON, CheckConstraint, func
from sqlalchemy.orm import relationship
from garage_rental.core.config import LEGACY_DAYS_PER_MONTH
from garage_rental.db.base import Base
from garage_rental.db.models.amenity import garage_amenities


class Garage(Base):
    __tablename__ = "garages"
    __table_args__ = (
        CheckConstraint("slot >= 1"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Basic details
    title = Column(String, nullable=False)
    location = Column(String, nullable=False)
    description = Column(String, nullable=True)

    # Pricing
    price_per_month = Column(Float, nullable=True)
    price_per_day = Column(Float, nullable=True)  # legacy listings only

    # Capacity
    slot = Column(Integer, nullable=False, default=1)
    is_available = Column(Boolean, nullable=False, default=True)

    images = Column(JSON, nullable=False, default=list)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    amenities = relationship(
        "Amenity",
        secondary=garage_amenities,
        back_populates="garages",
        lazy="selectin",
        order_by="Amenity.name",
    )
    bookings = relationship("Booking", back_populates="garage", lazy="selectin")
    reviews = relationship("Review", back_populates="garage", lazy="selectin", cascade="all, delete-orphan")

    @property
    def monthly_rate(self):
        """Canonical monthly price; legacy day-priced rows are converted on read."""
        if self.price_per_month is not None:
            return self.price_per_month
        if self.price_per_day is not None:
            return self.price_per_day * LEGACY_DAYS_PER_MONTH
        return None
