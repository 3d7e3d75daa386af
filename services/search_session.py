# services/search_session.py
"""
Search Session - the client-side search controller.

Filter changes are debounced: each change cancels the pending scheduled
fetch and reschedules it (last write wins). Once a fetch is dispatched it
is never cancelled; instead each one carries a sequence number and any
response older than the most recently dispatched request is discarded.

A failed fetch adds a notice and keeps the previous results. There is no
retry; the next filter change or refresh() fetches again.
"""
import asyncio
import dataclasses
import logging
from typing import Awaitable, Callable, List, Optional, Set

from .notices import Notice, load_failed
from .search_service import SpaceSearchFilters

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.3

# (filters, request_seq) -> list of space rows
Fetcher = Callable[[SpaceSearchFilters, int], Awaitable[List[dict]]]


class SearchSession:
     def __init__(
          self,
          fetch: Fetcher,
          filters: Optional[SpaceSearchFilters] = None,
          debounce_seconds: float = DEBOUNCE_SECONDS,
     ):
          self._fetch = fetch
          self.filters = filters or SpaceSearchFilters()
          self.debounce_seconds = debounce_seconds
          self.results: List[dict] = []
          self.notices: List[Notice] = []
          self.loading = False
          self._issued_seq = 0
          self._applied_seq = 0
          self._pending: Optional[asyncio.Task] = None
          self._in_flight: Set[asyncio.Task] = set()

     @property
     def state(self) -> str:
          """idle (nothing applied yet), loading, no_results or results."""
          if self.loading:
               return "loading"
          if self._applied_seq == 0:
               return "idle"
          if not self.results:
               return "no_results"
          return "results"

     @property
     def applied_seq(self) -> int:
          return self._applied_seq

     def update_filters(self, **changes) -> None:
          """Change one or more filters and schedule a debounced fetch."""
          self.filters = dataclasses.replace(self.filters, **changes)
          self._schedule()

     def _schedule(self) -> None:
          if self._pending is not None and not self._pending.done():
               self._pending.cancel()
          self._pending = asyncio.get_running_loop().create_task(self._debounced())

     async def _debounced(self) -> None:
          await asyncio.sleep(self.debounce_seconds)
          self._dispatch()

     def _dispatch(self) -> asyncio.Task:
          self._issued_seq += 1
          task = asyncio.get_running_loop().create_task(self._run(self._issued_seq, self.filters))
          self._in_flight.add(task)
          task.add_done_callback(self._in_flight.discard)
          return task

     async def _run(self, seq: int, filters: SpaceSearchFilters) -> None:
          self.loading = True
          try:
               rows = await self._fetch(filters, seq)
          except Exception as exc:
               if seq == self._issued_seq:
                    logger.warning("Search request %s failed: %s", seq, exc)
                    self.notices.append(load_failed())
               return
          finally:
               if seq == self._issued_seq:
                    self.loading = False

          if seq < self._issued_seq:
               logger.debug("Discarding stale search response %s (latest %s)", seq, self._issued_seq)
               return
          self._applied_seq = seq
          self.results = list(rows or [])

     async def refresh(self) -> None:
          """Fetch immediately, dropping any pending debounced fetch."""
          if self._pending is not None and not self._pending.done():
               self._pending.cancel()
          await self._dispatch()

     async def wait_idle(self) -> None:
          """Wait until the pending debounce and all in-flight fetches have settled."""
          if self._pending is not None:
               try:
                    await self._pending
               except asyncio.CancelledError:
                    pass
          while self._in_flight:
               await asyncio.gather(*list(self._in_flight), return_exceptions=True)

     def dismiss_notices(self) -> None:
          self.notices.clear()
