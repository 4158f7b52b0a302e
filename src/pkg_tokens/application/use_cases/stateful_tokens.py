from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...domain.constants import STATEFUL_TOKEN_TYPES, TokenType
from ...domain.entities import TokenClaims, new_claims
from ...domain.exceptions import InvalidTokenError, TokenNotFoundError
from ...domain.value_objects import TTL
from ..token_store import TokenStoreBridge


@dataclass(slots=True)
class StatefulTokenService:
    """
    Application use case for revocable, store-backed tokens
    (password reset, email verification, refresh).

    A token is valid while its key exists in the store, the stored claims
    verify, and their type matches the one asked for. Expired and destroyed
    tokens look the same to callers.
    """

    bridge: TokenStoreBridge

    async def generate(
            self,
            token_type: TokenType,
            claims: TokenClaims,
            ttl: TTL,
            *,
            timeout: Optional[float] = None,
    ) -> str:
        """
        Store claims under a fresh random key and return the key.

        ACCESS_TOKEN is rejected: access tokens are stateless and have their
        own path.
        """
        if token_type not in STATEFUL_TOKEN_TYPES:
            raise ValueError(f"{token_type.name} cannot be issued as a stored token")
        if claims.token_type != token_type:
            raise ValueError(
                f"Claims carry {claims.token_type.name}, expected {token_type.name}"
            )
        return await self.bridge.put(claims, ttl, timeout=timeout)

    async def issue(
            self,
            subject: str,
            token_type: TokenType,
            ttl: TTL,
            *,
            timeout: Optional[float] = None,
    ) -> str:
        return await self.generate(
            token_type, new_claims(subject, token_type), ttl, timeout=timeout
        )

    async def decode(
            self,
            token_key: str,
            expected_type: TokenType,
            *,
            timeout: Optional[float] = None,
    ) -> TokenClaims:
        """
        Raises:
            InvalidTokenError       key absent, expired or destroyed; bad record
            InvalidTokenTypeError   stored type differs from expected_type
            UnexpectedSigningMethodError
        """
        try:
            return await self.bridge.load(token_key, expected_type, timeout=timeout)
        except TokenNotFoundError as exc:
            raise InvalidTokenError() from exc

    async def destroy(self, token_key: str, *, timeout: Optional[float] = None) -> None:
        await self.bridge.delete(token_key, timeout=timeout)
