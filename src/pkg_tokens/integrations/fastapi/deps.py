from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..common.token_factory import TokenManager
from ...domain.entities import TokenClaims
from ...domain.exceptions import TokenError, TokenExpiredError

# Plug into dependencies for the OpenAPI security scheme
bearer_scheme = HTTPBearer(auto_error=False)

_BEARER_PREFIX = "Bearer "


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def bearer_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
) -> str | None:
    """Access token from the Bearer credentials, or None when absent."""
    if credentials is not None and (credentials.credentials or "").strip():
        return credentials.credentials.strip()

    header = request.headers.get("Authorization") or ""
    if header.startswith(_BEARER_PREFIX):
        return header[len(_BEARER_PREFIX):].strip() or None
    return None


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_tokens.

    Built on top of the framework-agnostic TokenManager facade; only
    stateless access tokens are checked here.
    """

    manager: TokenManager

    async def get_current_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> TokenClaims:
        """Dependency: Require a valid access token."""
        token = bearer_token_from_request(request, credentials)
        if token is None:
            raise _unauthorized("Not authenticated")
        try:
            return self.manager.verify_access_token(token)
        except TokenExpiredError as exc:
            raise _unauthorized("Token expired") from exc
        except TokenError as exc:
            raise _unauthorized("Invalid token") from exc

    async def get_optional_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> TokenClaims | None:
        """Dependency: Optional authentication; bad or missing tokens are anonymous."""
        token = bearer_token_from_request(request, credentials)
        if token is None:
            return None
        try:
            return self.manager.verify_access_token(token)
        except TokenError:
            return None


"""

from pkg_tokens.integrations.fastapi import create_fastapi_token_auth
from app.config import settings  # your own settings

token_auth = create_fastapi_token_auth(settings=settings.tokens)

get_current_claims = token_auth.get_current_claims
get_optional_claims = token_auth.get_optional_claims


"""
