from datetime import date
from types import SimpleNamespace

import pytest

from garage_rental.services.availability import (
    active_booking_count,
    active_bookings_query,
    garage_slots_left,
    is_bookable,
    month_window,
    overlaps,
    slots_left,
)

from conftest import make_booking, make_garage


def _garage(id=1, slot=2, is_available=True):
    return SimpleNamespace(id=id, slot=slot, is_available=is_available)


def _booking(start, end, status="approved", garage_id=1):
    return SimpleNamespace(garage_id=garage_id, start_date=start, end_date=end, status=status)


def test_overlap_is_inclusive_on_both_ends():
    assert overlaps(date(2024, 3, 10), date(2024, 3, 20), date(2024, 3, 20), date(2024, 3, 25))
    assert overlaps(date(2024, 3, 25), date(2024, 3, 30), date(2024, 3, 20), date(2024, 3, 25))
    assert not overlaps(date(2024, 3, 10), date(2024, 3, 20), date(2024, 3, 21), date(2024, 3, 25))


def test_boundary_booking_counts_only_when_touching_window():
    bookings = [_booking(date(2024, 3, 10), date(2024, 3, 20))]
    g = _garage()
    assert active_booking_count(g, bookings, date(2024, 3, 20), date(2024, 3, 25)) == 1
    assert active_booking_count(g, bookings, date(2024, 3, 21), date(2024, 3, 25)) == 0


@pytest.mark.parametrize("status", ["rejected", "removed"])
def test_terminal_bookings_never_count(status):
    bookings = [_booking(date(2024, 1, 1), date(2024, 12, 31), status=status)]
    assert active_booking_count(_garage(), bookings, date(2024, 3, 1), date(2024, 3, 31)) == 0


def test_pending_and_approved_both_count():
    bookings = [
        _booking(date(2024, 3, 1), date(2024, 3, 31), status="pending"),
        _booking(date(2024, 3, 1), date(2024, 4, 30), status="approved"),
    ]
    assert active_booking_count(_garage(), bookings, date(2024, 3, 1), date(2024, 3, 31)) == 2


def test_other_garages_are_ignored():
    bookings = [_booking(date(2024, 3, 1), date(2024, 3, 31), garage_id=2)]
    assert active_booking_count(_garage(id=1), bookings, date(2024, 3, 1), date(2024, 3, 31)) == 0


def test_slots_left_never_negative():
    g = _garage(slot=2)
    assert slots_left(g, 0) == 2
    assert slots_left(g, 2) == 0
    assert slots_left(g, 5) == 0


def test_bookable_needs_capacity_and_kill_switch():
    assert is_bookable(_garage(), 1)
    assert not is_bookable(_garage(), 0)
    assert not is_bookable(_garage(is_available=False), 3)


def test_month_window():
    assert month_window(date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_window(date(2023, 12, 31)) == (date(2023, 12, 1), date(2023, 12, 31))


def test_active_bookings_query_filters_in_the_store(db, user):
    g1 = make_garage(db, title="One", slot=2)
    g2 = make_garage(db, title="Two", slot=1)
    make_booking(db, user, g1, date(2024, 3, 10), date(2024, 3, 20), status="approved")
    make_booking(db, user, g1, date(2024, 3, 1), date(2024, 3, 31), status="rejected")
    make_booking(db, user, g1, date(2024, 5, 1), date(2024, 5, 31), status="pending")
    make_booking(db, user, g2, date(2024, 3, 15), date(2024, 4, 15), status="pending")

    rows = active_bookings_query(db, date(2024, 3, 20), date(2024, 3, 25)).all()
    assert sorted((b.garage_id, b.status) for b in rows) == [(g1.id, "approved"), (g2.id, "pending")]

    only_g2 = active_bookings_query(db, date(2024, 3, 20), date(2024, 3, 25), [g2.id]).all()
    assert [b.garage_id for b in only_g2] == [g2.id]

    assert garage_slots_left(db, g1, date(2024, 3, 1), date(2024, 3, 31)) == 1
    assert garage_slots_left(db, g2, date(2024, 3, 1), date(2024, 3, 31)) == 0
