# garage_rental/services/availability.py
"""
Slot availability for garages.

Each garage rents out `slot` bays. A pending or approved booking whose date
range touches the query window holds one bay for that window. The count is
advisory: it is recomputed from rows the caller fetched and nothing reserves
the bay between counting and inserting.
"""
import calendar
from datetime import date
from typing import Iterable, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from garage_rental.db.models.booking import Booking

ACTIVE_STATUSES = ("pending", "approved")


def overlaps(start1, end1, start2, end2) -> bool:
    # inclusive on both ends: a booking ending on the 20th touches a window starting on the 20th
    return start1 <= end2 and end1 >= start2


def month_window(day: date) -> Tuple[date, date]:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def active_booking_count(garage, bookings: Iterable, query_start: date, query_end: date) -> int:
    return sum(
        1
        for b in bookings
        if b.garage_id == garage.id
        and b.status in ACTIVE_STATUSES
        and overlaps(b.start_date, b.end_date, query_start, query_end)
    )


def slots_left(garage, active_count: int) -> int:
    return max((garage.slot or 0) - active_count, 0)


def is_bookable(garage, left: int) -> bool:
    """Both the admin kill-switch and free capacity gate bookability."""
    return bool(garage.is_available) and left > 0


def active_bookings_query(
    db: Session,
    query_start: date,
    query_end: date,
    garage_ids: Optional[Sequence[int]] = None,
):
    """Bookings that could hold a slot in the window (filtered again by active_booking_count)."""
    q = db.query(Booking).filter(
        Booking.status.in_(ACTIVE_STATUSES),
        Booking.start_date <= query_end,
        Booking.end_date >= query_start,
    )
    if garage_ids is not None:
        q = q.filter(Booking.garage_id.in_(list(garage_ids)))
    return q


def garage_slots_left(db: Session, garage, query_start: date, query_end: date) -> int:
    bookings = active_bookings_query(db, query_start, query_end, [garage.id]).all()
    return slots_left(garage, active_booking_count(garage, bookings, query_start, query_end))
