# garage_rental/schemas/admin_dashboard.py
from typing import List, Optional

from garage_rental.schemas.common import CamelModel


class KPIItem(CamelModel):
    total_users: int
    total_garages: int
    total_bookings: int
    pending_bookings: int
    approved_bookings: int
    total_revenue: float


class GarageRentalItem(CamelModel):
    garage_id: int
    title: str
    rentals: int
    revenue: float
    slot: int
    slots_left_this_month: int
    is_available: bool


class AdminDashboardResponse(CamelModel):
    period: str
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    kpis: KPIItem
    bookings_by_status: dict
    garages: List[GarageRentalItem]
