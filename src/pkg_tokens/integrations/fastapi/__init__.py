from __future__ import annotations

from .deps import FastAPITokenAuth, bearer_scheme, bearer_token_from_request
from ..common.token_factory import (
    TokenManager,
    create_token_manager,
    create_token_manager_from_redis,
)
from ...domain.ports import KeyValueStore
from ...settings import TokenManagerSettings


def create_fastapi_token_auth(
    *,
    settings: TokenManagerSettings,
    store: KeyValueStore | None = None,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates a TokenManager (Redis-backed unless a store is given)
    - Wraps it in FastAPITokenAuth, exposing dependencies like:

        token_auth.get_current_claims
        token_auth.get_optional_claims

    The manager stays reachable as `token_auth.manager` for issuing and
    revoking tokens from route handlers.
    """
    manager: TokenManager
    if store is None:
        manager = create_token_manager_from_redis(settings)
    else:
        manager = create_token_manager(settings, store)
    return FastAPITokenAuth(manager=manager)


__all__ = [
    "FastAPITokenAuth",
    "bearer_scheme",
    "create_fastapi_token_auth",
    "bearer_token_from_request",
]
