# src/pkg_tokens/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Union

TTL = Union[timedelta, int, float]


def normalize_ttl(ttl: TTL) -> timedelta:
    """
    Turn a TTL given as timedelta or seconds into a strictly positive timedelta.
    """
    if isinstance(ttl, bool):
        raise TypeError("TTL must be a timedelta or a number of seconds")
    if isinstance(ttl, timedelta):
        value = ttl
    elif isinstance(ttl, (int, float)):
        value = timedelta(seconds=ttl)
    else:
        raise TypeError("TTL must be a timedelta or a number of seconds")

    if value <= timedelta(0):
        raise ValueError(f"TTL must be positive, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class SigningKey:
    """
    Pre-shared symmetric key used for HMAC signing.

    The secret never shows up in repr() or str().
    """
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Signing key must not be empty")

    def __repr__(self) -> str:
        return "SigningKey(value='***')"

    __str__ = __repr__

    def as_bytes(self) -> bytes:
        return self.value.encode("utf-8")
