from decimal import Decimal

import pytest

from models import UserRole
from services.search_service import SpaceSearchFilters, parse_price_range, search_spaces


@pytest.mark.parametrize(
    "token, expected",
    [
        ("10000-25000", (Decimal("10000"), Decimal("25000"))),
        ("0-10000", (Decimal("0"), Decimal("10000"))),
        ("50000", (Decimal("50000"), None)),
        ("100-abc", (Decimal("100"), None)),
        ("100-", (Decimal("100"), None)),
        ("100-0", (Decimal("100"), None)),
        ("", (None, None)),
        (None, (None, None)),
    ],
)
def test_parse_price_range(token, expected):
    assert parse_price_range(token) == expected


@pytest.fixture
def listings(make_profile, make_space):
    """3 buildings (12000/20000/60000) and 2 vehicles (15000/30000)."""
    owner = make_profile(UserRole.BUILDING_OWNER)
    return {
        "b12": make_space(owner, title="Rooftop A", location="Pune, Maharashtra", price=Decimal("12000")),
        "v15": make_space(owner, title="Bus wrap", location="Chennai, Tamil Nadu", space_type="vehicle",
                          price=Decimal("15000")),
        "b20": make_space(owner, title="Mall facade", location="Bengaluru, Karnataka", price=Decimal("20000")),
        "v30": make_space(owner, title="Taxi panel", location="Mumbai, Maharashtra", space_type="vehicle",
                          price=Decimal("30000")),
        "b60": make_space(owner, title="Highway hoarding", location="Delhi", price=Decimal("60000")),
    }


def test_building_price_range_scenario(db_session, listings):
    filters = SpaceSearchFilters(space_type="building", price_range="10000-25000")

    results = search_spaces(db_session, filters, enhanced=True)

    # Newest first: b20 was created after b12
    assert [s.id for s in results] == [listings["b20"].id, listings["b12"].id]


def test_price_bounds_are_inclusive(db_session, listings):
    results = search_spaces(db_session, SpaceSearchFilters(price_range="12000-20000"))

    assert {s.id for s in results} == {listings["b12"].id, listings["v15"].id, listings["b20"].id}


def test_open_ended_price_range(db_session, listings):
    results = search_spaces(db_session, SpaceSearchFilters(price_range="30000"))

    assert {s.id for s in results} == {listings["v30"].id, listings["b60"].id}


def test_non_numeric_upper_bound_is_open_ended(db_session, listings):
    results = search_spaces(db_session, SpaceSearchFilters(price_range="20000-lots"))

    assert all(s.price_per_month >= 20000 for s in results)
    assert listings["b60"].id in {s.id for s in results}


def test_empty_search_returns_all_available(db_session, listings, make_profile, make_space):
    owner = make_profile(UserRole.VEHICLE_OWNER)
    hidden = make_space(owner, title="Booked truck", status="booked")

    results = search_spaces(db_session, SpaceSearchFilters(search="   "))

    ids = {s.id for s in results}
    assert ids == {s.id for s in listings.values()}
    assert hidden.id not in ids


def test_only_available_spaces_are_returned(db_session, make_profile, make_space):
    owner = make_profile()
    make_space(owner, title="Gone", status="unavailable")

    assert search_spaces(db_session, SpaceSearchFilters(), enhanced=True) == []


def test_enhanced_search_matches_title_or_location(db_session, listings):
    by_title = search_spaces(db_session, SpaceSearchFilters(search="TAXI"), enhanced=True)
    by_location = search_spaces(db_session, SpaceSearchFilters(search="pune"), enhanced=True)

    assert [s.id for s in by_title] == [listings["v30"].id]
    assert [s.id for s in by_location] == [listings["b12"].id]


def test_basic_search_matches_location_only(db_session, listings):
    assert search_spaces(db_session, SpaceSearchFilters(search="taxi")) == []
    assert [s.id for s in search_spaces(db_session, SpaceSearchFilters(search="Chennai"))] == [listings["v15"].id]


def test_state_filter_is_anded_with_free_text(db_session, listings):
    filters = SpaceSearchFilters(search="wrap", state="Maharashtra")

    # "Bus wrap" matches the text but is in Tamil Nadu
    assert search_spaces(db_session, filters, enhanced=True) == []

    filters = SpaceSearchFilters(search="panel", state="maharashtra")
    assert [s.id for s in search_spaces(db_session, filters, enhanced=True)] == [listings["v30"].id]


def test_like_wildcards_are_literal(db_session, listings):
    assert search_spaces(db_session, SpaceSearchFilters(search="%"), enhanced=True) == []


def test_enhanced_search_loads_owner(db_session, make_profile, make_space):
    owner = make_profile(UserRole.BUILDING_OWNER, first_name="Asha", company_name="Rao Estates")
    make_space(owner, title="Tower wall")

    (space,) = search_spaces(db_session, SpaceSearchFilters(search="tower"), enhanced=True)

    assert space.owner.first_name == "Asha"
    assert space.owner.company_name == "Rao Estates"
