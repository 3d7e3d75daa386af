from decimal import Decimal

import pytest

from models import UserRole
from services.errors import PasswordMismatchError
from services.search_service import SpaceSearchFilters
from services.search_session import SearchSession
from utils.api_client import AdoraAPIError, AdoraClient, register, search_fetcher


class RecordingHttp:
    def __init__(self):
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url))
        raise AssertionError("no request expected")


def test_password_mismatch_aborts_before_any_request():
    http = RecordingHttp()
    client = AdoraClient(http=http)

    with pytest.raises(PasswordMismatchError):
        client.sign_up("a@example.com", "abc123", "xyz789", first_name="A", last_name="B")

    notice = register(client, "a@example.com", "abc123", "xyz789", first_name="A", last_name="B")

    assert notice.title == "Password Mismatch"
    assert http.calls == []
    assert not client.session.is_authenticated


def test_sign_up_search_and_sign_out(client, make_profile, make_space):
    owner = make_profile(UserRole.BUILDING_OWNER)
    make_space(owner, title="Airport billboard", location="Hyderabad, Telangana", price=Decimal("45000"))
    api = AdoraClient(http=client)

    notice = register(api, "brand@example.com", "abc123", "abc123",
                      first_name="Nia", last_name="Shah", role="brand")
    assert notice.title == "Registration Successful"
    assert api.session.role == "brand_company"

    results = api.search_spaces(SpaceSearchFilters(search="airport", price_range="25000-50000"), request_seq=4)
    assert results["total"] == 1
    assert results["request_seq"] == 4
    assert results["spaces"][0]["owner"]["first_name"] == "Test"

    api.sign_out()
    assert not api.session.is_authenticated


def test_duplicate_registration_surfaces_server_error(client):
    api = AdoraClient(http=client)
    register(api, "dup@example.com", "abc123", "abc123", first_name="A", last_name="B")

    notice = register(AdoraClient(http=client), "dup@example.com", "abc123", "abc123",
                      first_name="A", last_name="B")

    assert notice.title == "Registration Failed"
    assert notice.is_error


def test_api_errors_carry_status(client):
    api = AdoraClient(http=client)

    with pytest.raises(AdoraAPIError) as excinfo:
        api.sign_in("nobody@example.com", "whatever")

    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_search_fetcher_feeds_search_session():
    seen = []

    class StubClient:
        def search_spaces(self, filters, enhanced, request_seq):
            seen.append((filters.search, enhanced, request_seq))
            return {"spaces": [{"id": 9}], "request_seq": request_seq}

    session = SearchSession(search_fetcher(StubClient()), debounce_seconds=0)
    session.update_filters(search="goa")
    await session.wait_idle()

    assert seen == [("goa", True, 1)]
    assert session.results == [{"id": 9}]
