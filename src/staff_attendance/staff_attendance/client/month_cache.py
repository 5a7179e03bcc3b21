from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .api_client import AttendanceApiClient

logger = logging.getLogger(__name__)

Scope = Tuple[int, int]
MonthData = Dict[str, List[dict]]


class MonthAttendanceCache:
    """Month attendance keyed by (scope, generation).

    Every navigation starts a new generation and drops cached months. A fetch
    remembers the generation it started in; if navigation happened meanwhile
    its result is discarded instead of stored.
    """

    def __init__(self, client: AttendanceApiClient):
        self._client = client
        self._lock = threading.Lock()
        self._generation = 0
        self._scope: Optional[Scope] = None
        self._entries: Dict[Tuple[Scope, int], MonthData] = {}

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def scope(self) -> Optional[Scope]:
        return self._scope

    def navigate(self, year: int, month: int) -> int:
        with self._lock:
            self._generation += 1
            self._scope = (year, month)
            self._entries.clear()
            return self._generation

    def invalidate(self) -> None:
        """Drop cached data after a write, keeping the current scope."""
        with self._lock:
            self._generation += 1
            self._entries.clear()

    def get(self, year: int, month: int) -> Optional[MonthData]:
        with self._lock:
            return self._entries.get(((year, month), self._generation))

    def store(self, scope: Scope, generation: int, data: MonthData) -> bool:
        with self._lock:
            if generation != self._generation or scope != self._scope:
                logger.debug("Dropping stale attendance batch %s (generation %s)", scope, generation)
                return False
            self._entries[(scope, generation)] = data
            return True

    def load(self) -> Optional[MonthData]:
        """Fetch the current scope unless cached; returns None if the batch went stale."""
        with self._lock:
            scope, generation = self._scope, self._generation
        if scope is None:
            raise RuntimeError("navigate() must be called before load()")

        cached = self.get(*scope)
        if cached is not None:
            return cached

        data = self._client.fetch_month(*scope)
        return data if self.store(scope, generation, data) else None
