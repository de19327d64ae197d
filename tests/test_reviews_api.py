from garage_rental.db.models.review import Review

from conftest import auth_headers


def _post_review(client, headers, garage, rating=5, comment="Great place"):
    return client.post(
        "/reviews",
        json={"garageId": garage.id, "rating": rating, "comment": comment},
        headers=headers,
    )


def test_create_and_list_reviews(client, user, user_headers, garage):
    res = _post_review(client, user_headers, garage)
    assert res.status_code == 200
    body = res.json()
    assert body["userId"] == user.id
    assert body["user"]["name"] == user.name
    assert body["garage"]["title"] == garage.title

    listed = client.get("/reviews", params={"garageId": garage.id})
    assert listed.status_code == 200
    assert [r["id"] for r in listed.json()] == [body["id"]]
    assert client.get(f"/reviews/{body['id']}").json()["rating"] == 5


def test_review_requires_login_and_valid_rating(client, user_headers, garage):
    assert _post_review(client, {}, garage).status_code == 401
    assert _post_review(client, user_headers, garage, rating=6).status_code == 400
    assert _post_review(client, user_headers, garage, rating=0).status_code == 400


def test_review_for_missing_garage(client, user_headers):
    res = client.post("/reviews", json={"garageId": 404, "rating": 4}, headers=user_headers)
    assert res.status_code == 404


def test_only_author_edits_review(client, db, user_headers, other_user, garage):
    review_id = _post_review(client, user_headers, garage, rating=3).json()["id"]

    res = client.patch(f"/reviews/{review_id}", json={"comment": "Changed my mind"}, headers=user_headers)
    assert res.status_code == 200
    assert res.json()["rating"] == 3
    assert res.json()["comment"] == "Changed my mind"

    stranger = client.patch(f"/reviews/{review_id}", json={"rating": 1}, headers=auth_headers(other_user))
    assert stranger.status_code == 404
    assert stranger.json() == {"error": "Review not found or unauthorized"}


def test_delete_review_author_or_admin(client, db, user_headers, other_user, admin_headers, garage):
    first = _post_review(client, user_headers, garage).json()["id"]
    second = _post_review(client, user_headers, garage, comment="Again").json()["id"]

    assert client.delete(f"/reviews/{first}", headers=auth_headers(other_user)).status_code == 403
    assert client.delete(f"/reviews/{first}", headers=user_headers).json() == {"success": True}
    assert client.delete(f"/reviews/{second}", headers=admin_headers).status_code == 200
    assert db.query(Review).count() == 0
    assert client.get(f"/reviews/{first}").status_code == 404
