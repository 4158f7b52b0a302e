from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...adapters.jwt.signer import JWTTokenSigner
from ...adapters.redis.store import RedisKeyValueStore
from ...application.token_store import TokenStoreBridge
from ...application.use_cases.access_tokens import AccessTokenService
from ...application.use_cases.stateful_tokens import StatefulTokenService
from ...domain.constants import TokenType
from ...domain.entities import TokenClaims
from ...domain.ports import KeyValueStore
from ...domain.value_objects import TTL
from ...settings import TokenManagerSettings


@dataclass(slots=True)
class TokenManager:
    """
    Framework-agnostic token lifecycle facade.

    Composes the stateless access-token service and the store-backed
    service. Integrations (FastAPI, CLI, etc.) call into this.
    """

    access: AccessTokenService
    stateful: StatefulTokenService

    # --- Stateless access tokens ------------------------------------------

    def generate_access_token(self, subject: str, ttl: TTL) -> str:
        return self.access.generate(subject, ttl)

    def decode_access_token(self, token: str) -> bool:
        """True for a valid access token, otherwise raises the specific TokenError."""
        return self.access.decode(token)

    def verify_access_token(self, token: str) -> TokenClaims:
        return self.access.verify(token)

    # --- Stateful tokens --------------------------------------------------

    async def generate_token(
            self,
            token_type: TokenType,
            claims: TokenClaims,
            ttl: TTL,
            *,
            timeout: Optional[float] = None,
    ) -> str:
        """
        Store claims and return an opaque key.

        Never use this for access tokens; use generate_access_token.
        Meant for RESET_PASSWORD, VERIFY_EMAIL and REFRESH_TOKEN.
        """
        return await self.stateful.generate(token_type, claims, ttl, timeout=timeout)

    async def issue_token(
            self,
            subject: str,
            token_type: TokenType,
            ttl: TTL,
            *,
            timeout: Optional[float] = None,
    ) -> str:
        return await self.stateful.issue(subject, token_type, ttl, timeout=timeout)

    async def decode_token(
            self,
            token_key: str,
            expected_type: TokenType,
            *,
            timeout: Optional[float] = None,
    ) -> TokenClaims:
        return await self.stateful.decode(token_key, expected_type, timeout=timeout)

    async def destroy_token(self, token_key: str, *, timeout: Optional[float] = None) -> None:
        await self.stateful.destroy(token_key, timeout=timeout)

    async def close(self) -> None:
        await self.stateful.bridge.store.close()


def create_access_token_service(settings: TokenManagerSettings) -> AccessTokenService:
    """
    Stateless access tokens only; no store is built.
    """
    return AccessTokenService(signer=JWTTokenSigner(settings.signing_key))


def create_token_manager(
        settings: TokenManagerSettings,
        store: KeyValueStore,
) -> TokenManager:
    """
    Wire signer, store bridge and both services into a TokenManager.
    """
    signer = JWTTokenSigner(settings.signing_key)
    bridge = TokenStoreBridge(
        store=store,
        signer=signer,
        key_prefix=settings.key_prefix,
    )
    return TokenManager(
        access=AccessTokenService(signer=signer),
        stateful=StatefulTokenService(bridge=bridge),
    )


def create_token_manager_from_redis(settings: TokenManagerSettings) -> TokenManager:
    """
    High-level factory: settings -> Redis-backed TokenManager.
    """
    store = RedisKeyValueStore.from_url(
        settings.redis_url,
        default_timeout=settings.store_timeout_seconds,
    )
    return create_token_manager(settings, store)
