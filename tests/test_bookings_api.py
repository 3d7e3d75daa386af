from decimal import Decimal

import pytest

from models import UserRole


@pytest.fixture
def parties(make_profile, make_space):
    owner = make_profile(UserRole.BUILDING_OWNER)
    brand = make_profile(UserRole.BRAND_COMPANY)
    space = make_space(owner, title="Metro wall", price=Decimal("20000"))
    return owner, brand, space


def _book(client, headers, space_id, **fields):
    payload = {"space_id": space_id, "start_date": "2026-11-01", "end_date": "2026-12-30"}
    payload.update(fields)
    return client.post("/api/bookings", json=payload, headers=headers)


def test_brand_books_space_with_default_amount(client, parties, headers_for):
    owner, brand, space = parties

    response = _book(client, headers_for(brand), space.id)

    assert response.status_code == 201
    data = response.json()
    # 60 days -> 2 billing months
    assert Decimal(str(data["total_amount"])) == Decimal("40000")
    assert data["booking_status"] == "pending"
    assert data["payment_status"] == "unpaid"
    assert data["space_title"] == "Metro wall"


def test_explicit_amount_is_kept(client, parties, headers_for):
    owner, brand, space = parties

    response = _book(client, headers_for(brand), space.id, total_amount=12345)

    assert Decimal(str(response.json()["total_amount"])) == Decimal("12345")


def test_owner_cannot_book(client, parties, headers_for):
    owner, brand, space = parties

    assert _book(client, headers_for(owner), space.id).status_code == 403


def test_booking_rejects_reversed_dates(client, parties, headers_for):
    owner, brand, space = parties

    response = _book(client, headers_for(brand), space.id, start_date="2026-12-01", end_date="2026-11-01")

    assert response.status_code == 422


def test_booking_unavailable_space_conflicts(client, make_profile, make_space, headers_for):
    owner = make_profile()
    brand = make_profile(UserRole.BRAND_COMPANY)
    space = make_space(owner, status="booked")

    assert _book(client, headers_for(brand), space.id).status_code == 409
    assert _book(client, headers_for(brand), 9999).status_code == 404


def test_lifecycle_confirm_then_pay(client, parties, headers_for):
    owner, brand, space = parties
    booking_id = _book(client, headers_for(brand), space.id).json()["id"]

    # Payment before confirmation is refused
    assert client.patch(f"/api/bookings/{booking_id}/mark-paid", headers=headers_for(owner)).status_code == 409
    # Only the space owner confirms
    assert client.patch(f"/api/bookings/{booking_id}/confirm", headers=headers_for(brand)).status_code == 403

    confirmed = client.patch(f"/api/bookings/{booking_id}/confirm", headers=headers_for(owner))
    assert confirmed.json()["booking_status"] == "confirmed"

    paid = client.patch(f"/api/bookings/{booking_id}/mark-paid", headers=headers_for(owner))
    assert paid.json()["payment_status"] == "paid"

    assert client.patch(f"/api/bookings/{booking_id}/mark-paid", headers=headers_for(owner)).status_code == 409
    assert client.patch(f"/api/bookings/{booking_id}/cancel", headers=headers_for(brand)).status_code == 409


def test_advertiser_cancels_pending_booking(client, parties, headers_for):
    owner, brand, space = parties
    booking_id = _book(client, headers_for(brand), space.id).json()["id"]

    cancelled = client.patch(f"/api/bookings/{booking_id}/cancel", headers=headers_for(brand))

    assert cancelled.json()["booking_status"] == "cancelled"
    assert client.patch(f"/api/bookings/{booking_id}/confirm", headers=headers_for(owner)).status_code == 409


def test_listing_bookings_by_side(client, parties, headers_for):
    owner, brand, space = parties
    booking_id = _book(client, headers_for(brand), space.id).json()["id"]

    mine = client.get("/api/bookings/mine", headers=headers_for(brand)).json()
    incoming = client.get("/api/bookings/incoming", headers=headers_for(owner)).json()

    assert [b["id"] for b in mine["bookings"]] == [booking_id]
    assert [b["id"] for b in incoming["bookings"]] == [booking_id]
    assert client.get("/api/bookings/mine", headers=headers_for(owner)).json()["total"] == 0
