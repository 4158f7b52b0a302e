from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.constants import TokenType
from ..domain.entities import TokenClaims
from ..domain.exceptions import TokenNotFoundError
from ..domain.keys import generate_token_key
from ..domain.ports import KeyValueStore, TokenSigner
from ..domain.value_objects import TTL, normalize_ttl
from .records import decode_record, encode_record


@dataclass(slots=True)
class TokenStoreBridge:
    """
    Persists signed claims in the key-value store under a random key.

    Every method is one store round trip; nothing is cached and nothing is
    retried. Store errors propagate unchanged.
    """

    store: KeyValueStore
    signer: TokenSigner
    key_prefix: str = ""
    key_factory: Callable[[], str] = generate_token_key

    def _store_key(self, token_key: str) -> str:
        return f"{self.key_prefix}{token_key}"

    async def put(
            self,
            claims: TokenClaims,
            ttl: TTL,
            *,
            timeout: Optional[float] = None,
    ) -> str:
        ttl = normalize_ttl(ttl)
        token_key = self.key_factory()
        record = encode_record(self.signer.sign(claims, ttl))
        await self.store.set(self._store_key(token_key), record, ttl, timeout=timeout)
        return token_key

    async def exists(self, token_key: str, *, timeout: Optional[float] = None) -> bool:
        value = await self.store.get(self._store_key(token_key), timeout=timeout)
        return value is not None

    async def fetch(self, token_key: str, *, timeout: Optional[float] = None) -> str:
        """
        Raises:
            TokenNotFoundError if the key is absent or expired.
        """
        value = await self.store.get(self._store_key(token_key), timeout=timeout)
        if value is None:
            raise TokenNotFoundError()
        return value

    async def load(
            self,
            token_key: str,
            expected_type: TokenType,
            *,
            timeout: Optional[float] = None,
    ) -> TokenClaims:
        """
        Fetch the record and verify the claims it carries.

        Raises:
            TokenNotFoundError
            InvalidTokenError
            InvalidTokenTypeError
            UnexpectedSigningMethodError
        """
        raw = await self.fetch(token_key, timeout=timeout)
        return self.signer.verify(decode_record(raw), expected_type)

    async def delete(self, token_key: str, *, timeout: Optional[float] = None) -> None:
        await self.store.delete(self._store_key(token_key), timeout=timeout)
