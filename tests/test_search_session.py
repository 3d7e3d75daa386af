import asyncio

import pytest

from services.search_service import SpaceSearchFilters
from services.search_session import SearchSession


@pytest.mark.asyncio
async def test_rapid_changes_are_debounced_into_one_fetch():
    calls = []

    async def fetch(filters, seq):
        calls.append(filters)
        return [{"id": 1}]

    session = SearchSession(fetch, debounce_seconds=0.02)
    session.update_filters(search="m")
    session.update_filters(search="mu")
    session.update_filters(search="mum", space_type="building")
    await session.wait_idle()

    assert calls == [SpaceSearchFilters(search="mum", space_type="building")]
    assert session.results == [{"id": 1}]
    assert session.state == "results"


@pytest.mark.asyncio
async def test_late_response_from_superseded_request_is_discarded():
    first_started = asyncio.Event()
    release_first = asyncio.Event()
    second_done = asyncio.Event()

    async def fetch(filters, seq):
        if seq == 1:
            first_started.set()
            await release_first.wait()
            return [{"id": "stale"}]
        second_done.set()
        return [{"id": "fresh"}]

    session = SearchSession(fetch, debounce_seconds=0.01)
    session.update_filters(search="a")
    await asyncio.wait_for(first_started.wait(), timeout=1)

    session.update_filters(search="ab")
    await asyncio.wait_for(second_done.wait(), timeout=1)
    await asyncio.sleep(0)

    release_first.set()
    await session.wait_idle()

    assert session.results == [{"id": "fresh"}]
    assert session.applied_seq == 2
    assert session.loading is False


@pytest.mark.asyncio
async def test_failure_keeps_previous_results_and_adds_notice():
    responses = [[{"id": 1}], RuntimeError("service unavailable")]

    async def fetch(filters, seq):
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    session = SearchSession(fetch, debounce_seconds=0)
    await session.refresh()
    session.update_filters(state="Goa")
    await session.wait_idle()

    assert session.results == [{"id": 1}]
    assert len(session.notices) == 1
    assert session.notices[0].title == "Error"
    assert session.loading is False

    session.dismiss_notices()
    assert session.notices == []


@pytest.mark.asyncio
async def test_empty_results_report_no_results_state():
    async def fetch(filters, seq):
        return []

    session = SearchSession(fetch, debounce_seconds=0)
    await session.refresh()

    assert session.state == "no_results"


@pytest.mark.asyncio
async def test_new_session_is_idle_until_first_response():
    release = asyncio.Event()

    async def fetch(filters, seq):
        await release.wait()
        return []

    session = SearchSession(fetch, debounce_seconds=0)
    assert session.state == "idle"

    session.update_filters(search="pune")
    await asyncio.sleep(0.01)
    assert session.state == "loading"

    release.set()
    await session.wait_idle()
    assert session.state == "no_results"
