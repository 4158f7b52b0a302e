from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from .constants import TokenType
from .exceptions import InvalidTokenError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """
    Payload bound to a token.

    `issued_at` / `expires_at` are epoch seconds and only get filled in
    when claims are read back from a signed token.
    """
    subject: str
    created_at: datetime
    token_type: TokenType
    issued_at: Optional[int] = None
    expires_at: Optional[int] = None

    # ---- wire form -------------------------------------------------------

    def to_payload(self, ttl: timedelta, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Wire form signed into a token. `iat`/`exp` count from `now` (the
        signing time), not from `created_at`; `exp` rounds up so a token
        never lives shorter than its TTL.
        """
        created = _as_utc(self.created_at)
        signed_at = _as_utc(now) if now is not None else _utcnow()
        return {
            "sub": self.subject,
            "createdAt": created.isoformat(),
            "tokenType": int(self.token_type),
            "iat": math.floor(signed_at.timestamp()),
            "exp": math.ceil((signed_at + ttl).timestamp()),
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TokenClaims":
        try:
            subject = payload["sub"]
            created_at = datetime.fromisoformat(payload["createdAt"])
            token_type = TokenType(payload["tokenType"])
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc

        if not isinstance(subject, str):
            raise InvalidTokenError()

        return cls(
            subject=subject,
            created_at=created_at,
            token_type=token_type,
            issued_at=payload.get("iat"),
            expires_at=payload.get("exp"),
        )


def new_claims(subject: str, token_type: TokenType) -> TokenClaims:
    """Fresh claims stamped with the current time. Subject is not validated."""
    return TokenClaims(subject=subject, created_at=_utcnow(), token_type=token_type)
