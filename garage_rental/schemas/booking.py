from pydantic import Field, computed_field
from datetime import date, datetime
from typing import Optional

from garage_rental.schemas.common import CamelModel, GarageMini, UserMini
from garage_rental.services.pricing import compute_months_span


# --- CREATE ---
# either startDate/endDate or startMonth/months
class BookingCreate(CamelModel):
    user_id: Optional[int] = None
    garage_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_month: Optional[str] = Field(default=None, description="YYYY-MM")
    months: Optional[int] = None
    status: Optional[str] = Field(
        default=None,
        description="Admins only: pending, approved, rejected, removed"
    )
    removed_reason: Optional[str] = None


# --- UPDATE (Admin) ---
class BookingUpdate(CamelModel):
    status: str = Field(..., description="Allowed values: pending, approved, rejected, removed")
    removed_reason: Optional[str] = None


# --- RESPONSE ---
class BookingResponse(CamelModel):
    id: int
    user_id: int
    garage_id: int
    start_date: date
    end_date: date
    status: str
    total_price: float
    removed_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    user: Optional[UserMini] = None
    garage: Optional[GarageMini] = None

    # billed months, as shown on the dashboards
    @computed_field
    @property
    def months(self) -> int:
        return compute_months_span(self.start_date, self.end_date)
