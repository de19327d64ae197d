# garage_rental/schemas/amenity.py
from pydantic import Field
from typing import Optional

from garage_rental.schemas.common import CamelModel


class AmenityCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class AmenityResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
