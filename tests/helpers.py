from datetime import datetime, timedelta, timezone

import jwt

from pkg_tokens.domain.entities import new_claims

# HS512 wants at least 64 bytes of key material.
SECRET = "unit-test-signing-secret-" * 4
OTHER_SECRET = "another-signing-secret-xyz-" * 4


class ManualClock:
    """Monotonic clock the tests move forward by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def tamper(token: str) -> str:
    """Change one character in the middle of the signature segment."""
    header, payload, signature = token.split(".")
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([header, payload, signature[:i] + replacement + signature[i + 1:]])


def hours_ago(n: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(hours=n)


def expired_token(subject: str, token_type, secret: str = SECRET) -> str:
    """HS512 token signed two hours ago with a one hour lifetime."""
    payload = new_claims(subject, token_type).to_payload(timedelta(hours=1), now=hours_ago(2))
    return jwt.encode(payload, secret.encode(), algorithm="HS512")
