# garage_rental/api/routes/admin_dashboard.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy import func, extract
from datetime import date
from typing import Optional

from garage_rental.db.base import get_db
from garage_rental.db.models.user import User
from garage_rental.db.models.booking import Booking
from garage_rental.db.models.garage import Garage
from garage_rental.schemas.admin_dashboard import (
    AdminDashboardResponse,
    KPIItem,
    GarageRentalItem,
)
from garage_rental.core.security import require_admin
from garage_rental.services import availability

router = APIRouter(prefix="/admin/dashboard", tags=["admin-dashboard"])

PERIODS = ("all", "year", "month", "day")


def _period_filters(period: str, year: int, month: int, day: int):
    # bookings are attributed to the period their start date falls in
    filters = []
    if period in ("year", "month", "day"):
        filters.append(extract("year", Booking.start_date) == year)
    if period in ("month", "day"):
        filters.append(extract("month", Booking.start_date) == month)
    if period == "day":
        filters.append(extract("day", Booking.start_date) == day)
    return filters


@router.get("", response_model=AdminDashboardResponse)
def admin_dashboard(
    period: str = Query("all", description="all | year | month | day"),
    year: Optional[int] = Query(None, ge=2000),
    month: Optional[int] = Query(None, ge=1, le=12),
    day: Optional[int] = Query(None, ge=1, le=31),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if period not in PERIODS:
        raise HTTPException(status_code=400, detail=f"period must be one of {', '.join(PERIODS)}")

    today = date.today()
    year = year or today.year
    month = month or today.month
    day = day or today.day

    # KPIs
    total_users = db.query(func.count(User.id)).scalar() or 0
    total_garages = db.query(func.count(Garage.id)).scalar() or 0
    total_bookings = db.query(func.count(Booking.id)).scalar() or 0
    pending = db.query(func.count(Booking.id)).filter(Booking.status == "pending").scalar() or 0
    approved = db.query(func.count(Booking.id)).filter(Booking.status == "approved").scalar() or 0
    total_revenue = db.query(func.coalesce(func.sum(Booking.total_price), 0)).filter(
        Booking.status == "approved"
    ).scalar() or 0.0

    kpis = KPIItem(
        total_users=int(total_users),
        total_garages=int(total_garages),
        total_bookings=int(total_bookings),
        pending_bookings=int(pending),
        approved_bookings=int(approved),
        total_revenue=float(total_revenue),
    )

    # bookings by status
    status_counts_q = db.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
    bookings_by_status = {row[0]: int(row[1]) for row in status_counts_q}

    # approved rentals and revenue per garage for the selected period
    period_filters = _period_filters(period, year, month, day)
    rental_rows = (
        db.query(
            Booking.garage_id,
            func.count(Booking.id).label("rentals"),
            func.coalesce(func.sum(Booking.total_price), 0).label("revenue"),
        )
        .filter(Booking.status == "approved", *period_filters)
        .group_by(Booking.garage_id)
        .all()
    )
    rentals_by_garage = {garage_id: (int(cnt), float(rev or 0.0)) for garage_id, cnt, rev in rental_rows}

    # live capacity for the current calendar month
    month_start, month_end = availability.month_window(today)
    active = availability.active_bookings_query(db, month_start, month_end).all()

    garages = []
    for g in db.query(Garage).order_by(Garage.title).all():
        rentals, revenue = rentals_by_garage.get(g.id, (0, 0.0))
        count = availability.active_booking_count(g, active, month_start, month_end)
        garages.append(GarageRentalItem(
            garage_id=g.id,
            title=g.title,
            rentals=rentals,
            revenue=revenue,
            slot=g.slot,
            slots_left_this_month=availability.slots_left(g, count),
            is_available=bool(g.is_available),
        ))

    return AdminDashboardResponse(
        period=period,
        year=year if period != "all" else None,
        month=month if period in ("month", "day") else None,
        day=day if period == "day" else None,
        kpis=kpis,
        bookings_by_status=bookings_by_status,
        garages=garages,
    )
