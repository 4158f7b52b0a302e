from __future__ import annotations

from datetime import timedelta
from typing import Optional, Protocol

from .constants import TokenType
from .entities import TokenClaims


class KeyValueStore(Protocol):
    """
    Port for the external key-value store holding stateful tokens.

    Implementations live in the adapters layer (e.g. Redis). Every call is
    a single network round trip; `timeout` bounds it in seconds and
    implementations fall back to their own default when it is None.
    Cancelling the awaiting task aborts the call.
    """

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        """Return the stored value, or None when the key does not exist."""
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Store value under key, expiring after ttl."""
        ...

    async def delete(self, key: str, *, timeout: Optional[float] = None) -> None:
        """Remove key. Removing a missing key is not an error."""
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        ...


class TokenSigner(Protocol):
    """
    Port for signing claims into a compact token and verifying it back.
    """

    def sign(self, claims: TokenClaims, ttl: timedelta) -> str:
        ...

    def verify(self, token: str, expected_type: Optional[TokenType] = None) -> TokenClaims:
        """
        Verify the given token and return its claims.

        Raises:
          - UnexpectedSigningMethodError
          - InvalidTokenError (TokenExpiredError on expiry)
          - InvalidTokenTypeError
        """
        ...
