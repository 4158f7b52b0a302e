"""
pkg_tokens

Clean-architecture token lifecycle core: stateless signed access tokens
and revocable store-backed tokens (password reset, email verification,
refresh), usable from any framework.
"""

__version__ = "0.1.0"

from .domain.constants import TokenType, TOKEN_BYTE_LENGTH, SIGNING_ALGORITHM
from .domain.entities import TokenClaims, new_claims
from .domain.exceptions import (
    TokenError,
    InvalidTokenError,
    TokenExpiredError,
    InvalidTokenTypeError,
    UnexpectedSigningMethodError,
    TokenNotFoundError,
)
from .domain.keys import generate_token_key
from .domain.ports import KeyValueStore, TokenSigner
from .domain.value_objects import SigningKey
from .settings import TokenManagerSettings, settings_from_env

from .application.token_store import TokenStoreBridge
from .application.use_cases.access_tokens import AccessTokenService
from .application.use_cases.stateful_tokens import StatefulTokenService

# Adapters
from .adapters.jwt.signer import JWTTokenSigner
from .adapters.memory.store import InMemoryKeyValueStore
from .adapters.redis.store import RedisKeyValueStore

from .integrations.common.token_factory import (
    TokenManager,
    create_access_token_service,
    create_token_manager,
    create_token_manager_from_redis,
)

__all__ = [
    "__version__",
    # domain core
    "TokenType",
    "TOKEN_BYTE_LENGTH",
    "SIGNING_ALGORITHM",
    "TokenClaims",
    "new_claims",
    "generate_token_key",
    "KeyValueStore",
    "TokenSigner",
    "SigningKey",
    # exceptions
    "TokenError",
    "InvalidTokenError",
    "TokenExpiredError",
    "InvalidTokenTypeError",
    "UnexpectedSigningMethodError",
    "TokenNotFoundError",
    # configuration
    "TokenManagerSettings",
    "settings_from_env",
    # use cases
    "TokenStoreBridge",
    "AccessTokenService",
    "StatefulTokenService",
    # adapters
    "JWTTokenSigner",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    # facade
    "TokenManager",
    "create_access_token_service",
    "create_token_manager",
    "create_token_manager_from_redis",
]
