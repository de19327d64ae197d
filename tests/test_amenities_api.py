def test_amenities_listed_by_name(client, admin_headers):
    for name in ("Security", "CCTV", "Electricity"):
        assert client.post("/amenities", json={"name": name}, headers=admin_headers).status_code == 200

    res = client.get("/amenities")
    assert res.status_code == 200
    assert [a["name"] for a in res.json()] == ["CCTV", "Electricity", "Security"]


def test_duplicate_amenity_rejected(client, admin_headers):
    client.post("/amenities", json={"name": "CCTV", "description": "24h camera"}, headers=admin_headers)
    res = client.post("/amenities", json={"name": "CCTV"}, headers=admin_headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Amenity with this name already exists"}


def test_amenity_name_required(client, admin_headers):
    assert client.post("/amenities", json={"name": "   "}, headers=admin_headers).status_code == 400
    assert client.post("/amenities", json={}, headers=admin_headers).status_code == 400


def test_only_admin_creates_amenities(client, user_headers):
    assert client.post("/amenities", json={"name": "Roof"}, headers=user_headers).status_code == 403
