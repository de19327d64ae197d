# garage_rental/services/lifecycle.py
"""
Booking status state machine plus the creation and status-change contracts.

    pending --admin--> approved
    pending --admin--> rejected            (terminal)
    pending|approved --admin, reason--> removed   (terminal)
"""
from dataclasses import dataclass
from decimal import Decimal
import enum
from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session

from garage_rental.core.errors import (
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
)
from garage_rental.db.models.booking import Booking
from garage_rental.db.models.garage import Garage
from garage_rental.db.models.user import User
from garage_rental.schemas.booking import BookingCreate
from garage_rental.services import availability, pricing


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    REMOVED = "removed"


TERMINAL_STATUSES = {BookingStatus.REJECTED, BookingStatus.REMOVED}

# transitions that need nothing beyond an admin actor
_ALLOWED = {
    BookingStatus.PENDING: {BookingStatus.APPROVED, BookingStatus.REJECTED},
    BookingStatus.APPROVED: set(),
}


@dataclass(frozen=True)
class Actor:
    user_id: int
    is_admin: bool = False


def parse_status(value) -> BookingStatus:
    try:
        return BookingStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in BookingStatus)
        raise ValidationError(f"Invalid status '{value}'. Allowed values: {allowed}")


def initial_status(actor: Actor, requested: Optional[str] = None) -> BookingStatus:
    if not actor.is_admin:
        return BookingStatus.PENDING
    if requested:
        return parse_status(requested)
    return BookingStatus.APPROVED


def _require_reason(reason: Optional[str]) -> str:
    if reason is None or not reason.strip():
        raise ValidationError("A reason is required to remove a booking")
    return reason.strip()


def validate_transition(current, new, reason: Optional[str] = None) -> BookingStatus:
    current = parse_status(current)
    new = parse_status(new)

    if current in TERMINAL_STATUSES:
        raise ValidationError(f"Booking is already {current.value} and cannot be changed")
    if new == BookingStatus.REMOVED:
        _require_reason(reason)
        return new
    if new not in _ALLOWED[current]:
        raise ValidationError(f"Cannot change booking from {current.value} to {new.value}")
    return new


def _resolve_dates(request: BookingCreate, monthly_rate):
    """Return (start_date, end_date, total_price) from either input shape."""
    if request.start_month is not None or request.months is not None:
        if request.start_month is None or request.months is None:
            raise ValidationError("startMonth and months must be given together")
        quote = pricing.compute_booking(request.start_month, request.months, monthly_rate)
        return quote.start_date, quote.end_date, quote.total_price

    if request.start_date is None or request.end_date is None:
        raise ValidationError("Missing required fields")
    # explicit ranges are billed per started month (see compute_months_span)
    total = pricing.price_for_range(request.start_date, request.end_date, monthly_rate)
    return request.start_date, request.end_date, total


def create_booking(db: Session, actor: Actor, request: BookingCreate) -> Booking:
    # regular users can only ever book for themselves
    if actor.is_admin:
        user_id = request.user_id or actor.user_id
    else:
        user_id = actor.user_id

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    garage = db.query(Garage).filter(Garage.id == request.garage_id).first()
    if not garage:
        raise NotFoundError("Garage not found")

    monthly_rate = garage.monthly_rate
    if monthly_rate is None:
        raise ConfigurationError(pricing.MISSING_RATE)

    start_date, end_date, total_price = _resolve_dates(request, monthly_rate)
    if total_price <= Decimal("0"):
        raise ValidationError("Total price must be greater than zero")

    status = initial_status(actor, request.status)
    removed_reason = None
    if status == BookingStatus.REMOVED:
        removed_reason = _require_reason(request.removed_reason)

    # admins may back-date or overbook; users only get free, enabled garages
    if not actor.is_admin:
        left = availability.garage_slots_left(db, garage, start_date, end_date)
        if not availability.is_bookable(garage, left):
            logger.warning(f"Booking refused: garage={garage.id} full or disabled for {start_date}..{end_date}")
            raise ValidationError("Garage is not available for the selected dates")

    booking = Booking(
        user_id=user.id,
        garage_id=garage.id,
        start_date=start_date,
        end_date=end_date,
        status=status.value,
        total_price=float(total_price),
        removed_reason=removed_reason,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)

    logger.info(
        f"Booking created: id={booking.id} user={user.id} garage={garage.id} "
        f"{start_date}..{end_date} status={booking.status} total={total_price}"
    )
    return booking


def get_booking_for(db: Session, actor: Actor, booking_id: int) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise NotFoundError("Booking not found")
    if not actor.is_admin and booking.user_id != actor.user_id:
        raise AuthorizationError("Not your booking")
    return booking


def change_status(
    db: Session,
    actor: Actor,
    booking_id: int,
    new_status,
    reason: Optional[str] = None,
) -> Booking:
    if not actor.is_admin:
        raise AuthorizationError("Only administrators can change booking status")

    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise NotFoundError("Booking not found")

    new = validate_transition(booking.status, new_status, reason)
    previous = booking.status
    booking.status = new.value
    if new == BookingStatus.REMOVED:
        booking.removed_reason = _require_reason(reason)

    db.commit()
    db.refresh(booking)

    logger.info(f"Booking {booking.id} status {previous} -> {booking.status} by user={actor.user_id}")
    return booking
