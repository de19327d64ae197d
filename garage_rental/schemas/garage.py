# garage_rental/schemas/garage.py

from pydantic import AliasChoices, Field, model_validator
from typing import Optional
from datetime import datetime

from garage_rental.core.config import LEGACY_DAYS_PER_MONTH
from garage_rental.schemas.amenity import AmenityResponse
from garage_rental.schemas.common import CamelModel


def _legacy_day_price(data):
    # older clients send pricePerDay; store it as a monthly price
    if isinstance(data, dict):
        day_price = data.pop("pricePerDay", None)
        if day_price is None:
            day_price = data.pop("price_per_day", None)
        if day_price is not None and data.get("pricePerMonth") is None and data.get("price_per_month") is None:
            data["price_per_month"] = float(day_price) * LEGACY_DAYS_PER_MONTH
    return data


# Shared fields
class GarageBase(CamelModel):
    title: str
    location: str
    description: Optional[str] = None
    price_per_month: Optional[float] = Field(default=None, ge=0)
    slot: int = Field(default=1, ge=1)
    is_available: Optional[bool] = True
    images: list[str] = []


# Admin creates garage
class GarageCreate(GarageBase):
    amenities: list[int] = []

    @model_validator(mode="before")
    @classmethod
    def normalize_price(cls, data):
        return _legacy_day_price(data)


# Admin updates garage
class GarageUpdate(CamelModel):
    title: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    price_per_month: Optional[float] = Field(default=None, ge=0)
    slot: Optional[int] = Field(default=None, ge=1)
    images: Optional[list[str]] = None
    amenities: Optional[list[int]] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_price(cls, data):
        return _legacy_day_price(data)


class GarageAvailabilityUpdate(CamelModel):
    is_available: bool


# What API returns
class GarageResponse(CamelModel):
    id: int

    title: str
    location: str
    description: Optional[str]
    price_per_month: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("monthly_rate", "pricePerMonth", "price_per_month"),
        serialization_alias="pricePerMonth",
    )
    slot: int
    is_available: bool
    images: list[str] = []

    amenities: list[AmenityResponse] = []

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GarageSlotsResponse(GarageResponse):
    active_bookings: int
    slots_left: int
    bookable: bool
