from datetime import date

from garage_rental.services.availability import month_window

from conftest import make_booking, make_garage


def test_dashboard_kpis_and_per_garage_rentals(client, db, user, admin_headers):
    north = make_garage(db, title="North", slot=2)
    south = make_garage(db, title="South", slot=1)

    make_booking(db, user, north, date(2023, 5, 1), date(2023, 5, 31), status="approved", total_price=100.0)
    make_booking(db, user, north, date(2024, 1, 1), date(2024, 2, 29), status="approved", total_price=200.0)
    make_booking(db, user, south, date(2024, 1, 1), date(2024, 1, 31), status="pending", total_price=50.0)
    make_booking(db, user, south, date(2024, 1, 1), date(2024, 1, 31), status="rejected", total_price=50.0)

    res = client.get("/admin/dashboard", headers=admin_headers)
    assert res.status_code == 200
    body = res.json()

    assert body["period"] == "all"
    assert body["year"] is None
    kpis = body["kpis"]
    assert kpis["totalGarages"] == 2
    assert kpis["totalBookings"] == 4
    assert kpis["pendingBookings"] == 1
    assert kpis["approvedBookings"] == 2
    assert kpis["totalRevenue"] == 300.0
    assert body["bookingsByStatus"] == {"approved": 2, "pending": 1, "rejected": 1}

    by_title = {g["title"]: g for g in body["garages"]}
    assert by_title["North"]["rentals"] == 2
    assert by_title["North"]["revenue"] == 300.0
    assert by_title["South"]["rentals"] == 0


def test_dashboard_year_filter(client, db, user, admin_headers):
    g = make_garage(db, title="North")
    make_booking(db, user, g, date(2023, 5, 1), date(2023, 5, 31), total_price=100.0)
    make_booking(db, user, g, date(2024, 1, 1), date(2024, 1, 31), total_price=200.0)

    res = client.get("/admin/dashboard", params={"period": "year", "year": 2024}, headers=admin_headers)
    body = res.json()
    assert body["year"] == 2024
    assert body["garages"][0]["rentals"] == 1
    assert body["garages"][0]["revenue"] == 200.0

    month = client.get(
        "/admin/dashboard", params={"period": "month", "year": 2023, "month": 6}, headers=admin_headers
    ).json()
    assert month["garages"][0]["rentals"] == 0


def test_dashboard_slots_left_this_month(client, db, user, admin_headers):
    g = make_garage(db, title="Busy", slot=2)
    start, end = month_window(date.today())
    make_booking(db, user, g, start, end, status="pending")

    res = client.get("/admin/dashboard", headers=admin_headers)
    item = res.json()["garages"][0]
    assert item["slot"] == 2
    assert item["slotsLeftThisMonth"] == 1
    assert item["isAvailable"] is True


def test_dashboard_rejects_unknown_period_and_non_admin(client, admin_headers, user_headers):
    assert client.get("/admin/dashboard", params={"period": "week"}, headers=admin_headers).status_code == 400
    assert client.get("/admin/dashboard", headers=user_headers).status_code == 403
