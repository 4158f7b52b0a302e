from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Awaitable, Optional, TypeVar

import redis.asyncio as redis

from ...domain.ports import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisKeyValueStore(KeyValueStore):
    """
    Adapter implementing KeyValueStore port on top of redis-py's asyncio client.

    Infrastructure layer:
    - Knows Redis commands (SET PX / GET / DEL).
    - Enforces per-call deadlines; Redis errors propagate unchanged.
    """

    def __init__(
        self,
        client: redis.Redis,
        default_timeout: Optional[float] = None,
    ) -> None:
        self._client = client
        self._default_timeout = default_timeout

    @classmethod
    def from_url(cls, url: str, default_timeout: Optional[float] = None) -> "RedisKeyValueStore":
        client = redis.from_url(url, decode_responses=True)
        return cls(client, default_timeout=default_timeout)

    @property
    def client(self) -> redis.Redis:
        return self._client

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        value = await self._call(self._client.get(key), timeout)
        if value is None:
            logger.debug("Store miss")
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        ttl_ms = int(ttl.total_seconds() * 1000)
        if ttl_ms < 1:
            raise ValueError(f"TTL must be at least one millisecond, got {ttl!r}")
        await self._call(self._client.set(key, value, px=ttl_ms), timeout)
        logger.debug("Stored value with ttl=%sms", ttl_ms)

    async def delete(self, key: str, *, timeout: Optional[float] = None) -> None:
        removed = await self._call(self._client.delete(key), timeout)
        logger.debug("Deleted %s key(s)", removed)

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _call(self, awaitable: Awaitable[T], timeout: Optional[float]) -> T:
        effective = timeout if timeout is not None else self._default_timeout
        if effective is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, effective)
