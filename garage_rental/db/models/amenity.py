# garage_rental/db/models/amenity.py
from sqlalchemy import Column, Integer, String, Table, ForeignKey
from sqlalchemy.orm import relationship
from garage_rental.db.base import Base

garage_amenities = Table(
    "garage_amenities",
    Base.metadata,
    Column("garage_id", Integer, ForeignKey("garages.id", ondelete="CASCADE"), primary_key=True),
    Column("amenity_id", Integer, ForeignKey("amenities.id", ondelete="CASCADE"), primary_key=True),
)


class Amenity(Base):
    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(String, nullable=True)

    garages = relationship(
        "Garage",
        secondary=garage_amenities,
        back_populates="amenities",
        lazy="selectin"
    )
