# garage_rental/services/pricing.py
"""
Booking price and duration computation.

Garages are rented by the calendar month. A booking either names a start
month and a number of months (the regular booking form) or an explicit
inclusive date range (admins back-dating historical bookings).
"""
import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from garage_rental.core.errors import ConfigurationError, ValidationError

CENT = Decimal("0.01")
MISSING_RATE = "garage missing monthly price"


@dataclass(frozen=True)
class BookingQuote:
    start_date: date
    end_date: date
    total_price: Decimal


def parse_year_month(value: Union[str, date]) -> date:
    """Return the first day of a `YYYY-MM` month (dates are truncated to their month)."""
    if isinstance(value, date):
        return value.replace(day=1)
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except (AttributeError, ValueError):
        raise ValidationError("Month must be in YYYY-MM format")


def parse_iso_date(value: Union[str, date], field: str = "date") -> date:
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"{field} must be in YYYY-MM-DD format")


def add_months(day: date, months: int) -> date:
    """Shift `day` by whole calendar months, clamping to the end of shorter months."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    try:
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, min(day.day, last_day))
    except (ValueError, OverflowError):
        raise ValidationError("Booking range is out of range")


def _to_rate(monthly_rate) -> Decimal:
    if monthly_rate is None:
        raise ConfigurationError(MISSING_RATE)
    rate = Decimal(str(monthly_rate))
    if rate < 0:
        raise ConfigurationError("garage monthly price cannot be negative")
    return rate


def _round(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_booking(start_month, months: int, monthly_rate) -> BookingQuote:
    """
    Derive the date range and price of a booking of `months` whole months
    starting on the first day of `start_month`.

    e.g. ("2024-03", 2, 100) -> 2024-03-01 .. 2024-04-30, total 200.00
    """
    if months is None or int(months) < 1:
        raise ValidationError("Number of months must be at least 1")
    months = int(months)
    rate = _to_rate(monthly_rate)

    start_date = parse_year_month(start_month)
    end_date = add_months(start_date, months) - timedelta(days=1)
    return BookingQuote(
        start_date=start_date,
        end_date=end_date,
        total_price=_round(rate * months),
    )


def compute_months_span(start_date, end_date) -> int:
    """
    Number of billed months for an inclusive date range.

    Month difference ignoring the day of month, plus one when the end day is
    on or after the start day. Partial trailing days are billed as a full
    month, and a same-day range is one month.
    """
    start_date = parse_iso_date(start_date, "startDate")
    end_date = parse_iso_date(end_date, "endDate")
    if end_date < start_date:
        raise ValidationError("endDate must be on or after startDate")

    months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    if end_date.day >= start_date.day:
        months += 1
    return months


def price_for_range(start_date, end_date, monthly_rate) -> Decimal:
    # billed with the ceiling rule of compute_months_span
    rate = _to_rate(monthly_rate)
    return _round(rate * compute_months_span(start_date, end_date))
