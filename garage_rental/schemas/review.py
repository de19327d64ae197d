# garage_rental/schemas/review.py
from pydantic import Field, conint
from typing import Optional
from datetime import datetime

from garage_rental.schemas.common import CamelModel


class ReviewCreate(CamelModel):
    garage_id: int
    rating: conint(ge=1, le=5) = Field(..., description="Rating 1-5")
    comment: Optional[str] = None


class ReviewUpdate(CamelModel):
    rating: Optional[conint(ge=1, le=5)] = None
    comment: Optional[str] = None


class ReviewUser(CamelModel):
    id: int
    name: str


class ReviewGarage(CamelModel):
    id: int
    title: str


class ReviewResponse(CamelModel):
    id: int
    user_id: int
    garage_id: int
    rating: int
    comment: Optional[str]
    created_at: Optional[datetime] = None

    user: Optional[ReviewUser] = None
    garage: Optional[ReviewGarage] = None
