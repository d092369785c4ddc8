"""Integration tests for the booking endpoints."""

from httpx import AsyncClient

from booking_api.app.core.security import create_access_token

BASE = "/api/v1"

BOOKING = {
    "start_date": "2024-05-01",
    "end_date": "2024-05-07",
    "cost_per_day": 100.0,
    "post_code": "00-950",
    "city": "Warsaw",
    "street": "Marszalkowska",
}


def _auth(username: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': username})}"}


async def _create(client: AsyncClient, username: str, **overrides) -> dict:
    resp = await client.post(f"{BASE}/bookings", json={**BOOKING, **overrides}, headers=_auth(username))
    assert resp.status_code == 201
    return resp.json()


async def test_requires_authentication(client):
    resp = await client.get(f"{BASE}/bookings")
    assert resp.status_code == 401


async def test_rejects_invalid_token(client):
    resp = await client.get(f"{BASE}/bookings", headers={"Authorization": "Bearer not.a.token"})
    assert resp.status_code == 401


async def test_create_and_get(client, alice):
    created = await _create(client, "alice")
    assert created["owner_id"] == alice.user_id
    assert created["username"] == "alice"

    resp = await client.get(f"{BASE}/bookings/{created['id']}", headers=_auth("alice"))
    assert resp.status_code == 200
    assert resp.json() == created


async def test_create_validates_body(client, alice):
    resp = await client.post(f"{BASE}/bookings", json={"city": "Warsaw"}, headers=_auth("alice"))
    assert resp.status_code == 422


async def test_get_missing_is_404(client, alice):
    resp = await client.get(f"{BASE}/bookings/999", headers=_auth("alice"))
    assert resp.status_code == 404


async def test_user_gets_403_for_foreign_booking(client, alice, bob):
    created = await _create(client, "bob")
    resp = await client.get(f"{BASE}/bookings/{created['id']}", headers=_auth("alice"))
    assert resp.status_code == 403


async def test_admin_reads_foreign_booking(client, admin, bob):
    created = await _create(client, "bob")
    resp = await client.get(f"{BASE}/bookings/{created['id']}", headers=_auth("admin"))
    assert resp.status_code == 200
    assert resp.json()["username"] == "bob"


async def test_update_booking(client, alice):
    created = await _create(client, "alice")
    resp = await client.put(
        f"{BASE}/bookings/{created['id']}",
        json={"cost_per_day": 75.5, "street": "Nowy Swiat"},
        headers=_auth("alice"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["cost_per_day"] == 75.5
    assert body["street"] == "Nowy Swiat"
    assert body["city"] == "Warsaw"


async def test_update_foreign_booking_is_403(client, alice, bob):
    created = await _create(client, "bob")
    resp = await client.put(f"{BASE}/bookings/{created['id']}", json={"city": "Lodz"}, headers=_auth("alice"))
    assert resp.status_code == 403


async def test_delete_booking(client, alice):
    created = await _create(client, "alice")
    resp = await client.delete(f"{BASE}/bookings/{created['id']}", headers=_auth("alice"))
    assert resp.status_code == 200
    assert resp.json() == {"detail": "Booking deleted"}

    resp = await client.get(f"{BASE}/bookings/{created['id']}", headers=_auth("alice"))
    assert resp.status_code == 404


async def test_delete_foreign_booking_is_403(client, alice, bob):
    created = await _create(client, "bob")
    resp = await client.delete(f"{BASE}/bookings/{created['id']}", headers=_auth("alice"))
    assert resp.status_code == 403


async def test_list_scoped_by_role(client, admin, alice, bob):
    await _create(client, "alice")
    await _create(client, "bob")
    await _create(client, "bob")

    resp = await client.get(f"{BASE}/bookings", headers=_auth("alice"))
    assert resp.status_code == 200
    assert [b["username"] for b in resp.json()["items"]] == ["alice"]

    resp = await client.get(f"{BASE}/bookings", headers=_auth("admin"))
    assert len(resp.json()["items"]) == 3


async def test_list_with_filters_and_pagination(client, admin):
    for day, cost in [("01", 50.0), ("05", 120.0), ("10", 80.0), ("15", 200.0), ("20", 95.0)]:
        await _create(client, "admin", start_date=f"2024-03-{day}", end_date="2024-04-01", cost_per_day=cost)

    resp = await client.get(
        f"{BASE}/bookings",
        params={"start_date_from": "05-03-2024", "cost_up": 150, "page_size": 1, "page_number": 2},
        headers=_auth("admin"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert [b["cost_per_day"] for b in body["items"]] == [80.0]
    assert body["page_count"] == 3
    assert body["has_next"] is True


async def test_list_page_size_above_result_count_is_empty(client, alice):
    await _create(client, "alice")
    resp = await client.get(f"{BASE}/bookings", params={"page_size": 5, "page_number": 1}, headers=_auth("alice"))
    assert resp.json() == {"items": [], "page_count": 0, "has_next": False}


async def test_list_bad_date_is_400(client, alice):
    resp = await client.get(f"{BASE}/bookings", params={"start_date_to": "31-02-2024"}, headers=_auth("alice"))
    assert resp.status_code == 400
    assert "start_date_to" in resp.json()["detail"]


async def test_booking_id_beyond_integer_range_is_422(client, alice):
    huge = "99999999999999999999"
    assert (await client.get(f"{BASE}/bookings/{huge}", headers=_auth("alice"))).status_code == 422
    assert (await client.put(f"{BASE}/bookings/{huge}", json={"city": "Gdansk"}, headers=_auth("alice"))).status_code == 422
    assert (await client.delete(f"{BASE}/bookings/{huge}", headers=_auth("alice"))).status_code == 422


async def test_owner_id_beyond_integer_range_is_422(client, admin):
    resp = await client.post(f"{BASE}/bookings", json={**BOOKING, "owner_id": 10**20}, headers=_auth("admin"))
    assert resp.status_code == 422

    created = await _create(client, "admin")
    resp = await client.put(
        f"{BASE}/bookings/{created['id']}", json={"owner_id": 10**20}, headers=_auth("admin")
    )
    assert resp.status_code == 422
