from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .domain.value_objects import SigningKey

DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_KEY_PREFIX = "token:"
DEFAULT_STORE_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class TokenManagerSettings:
    """
    Token manager configuration.

    Host code decides how to construct this (env, config file, etc.).
    Only `private_key` is required; the rest wires the Redis adapter.
    """
    private_key: str = field(repr=False)
    redis_url: str = DEFAULT_REDIS_URL
    key_prefix: str = DEFAULT_KEY_PREFIX
    store_timeout_seconds: Optional[float] = DEFAULT_STORE_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.private_key:
            raise ValueError("private_key must not be empty")
        if self.store_timeout_seconds is not None and self.store_timeout_seconds <= 0:
            raise ValueError("store_timeout_seconds must be positive or None")

    @property
    def signing_key(self) -> SigningKey:
        return SigningKey(self.private_key)


def settings_from_env() -> TokenManagerSettings:
    def _float_or_none(key: str, default: Optional[float]) -> Optional[float]:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        if raw.strip().lower() in {"none", "off"}:
            return None
        return float(raw)

    private_key = os.getenv("PKG_TOKENS_PRIVATE_KEY")
    if not private_key:
        raise RuntimeError("Missing token settings: PKG_TOKENS_PRIVATE_KEY")

    return TokenManagerSettings(
        private_key=private_key,
        redis_url=os.getenv("REDIS_URL", DEFAULT_REDIS_URL),
        key_prefix=os.getenv("PKG_TOKENS_KEY_PREFIX", DEFAULT_KEY_PREFIX),
        store_timeout_seconds=_float_or_none(
            "PKG_TOKENS_STORE_TIMEOUT", DEFAULT_STORE_TIMEOUT_SECONDS
        ),
    )
