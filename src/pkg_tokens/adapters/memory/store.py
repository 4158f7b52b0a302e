from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Dict, Optional, Tuple

from ...domain.ports import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """
    Process-local KeyValueStore with per-key expiry.

    Meant for tests and local development. `clock` returns seconds and
    defaults to time.monotonic, so tests can drive expiry explicitly.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._data: Dict[str, Tuple[str, float]] = {}

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if self._clock() >= deadline:
            del self._data[key]
            return None
        return value

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        now = self._clock()
        self._sweep(now)
        self._data[key] = (value, now + ttl.total_seconds())

    async def delete(self, key: str, *, timeout: Optional[float] = None) -> None:
        self._data.pop(key, None)

    async def close(self) -> None:
        """Nothing to release."""

    def _sweep(self, now: float) -> None:
        expired = [k for k, (_, deadline) in self._data.items() if now >= deadline]
        for key in expired:
            del self._data[key]

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for _, deadline in self._data.values() if now < deadline)
