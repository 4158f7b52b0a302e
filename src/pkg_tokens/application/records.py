"""
Encoding of the value stored under a stateful token key.

Version 1 is a compact JSON object with sorted keys:

    {"jws": "<HS512 compact JWS of the claims>", "v": 1}

The JWS carries the same expiry as the store TTL.
"""

from __future__ import annotations

import json

from ..domain.constants import STORED_RECORD_VERSION
from ..domain.exceptions import InvalidTokenError


def encode_record(signed_claims: str) -> str:
    return json.dumps(
        {"jws": signed_claims, "v": STORED_RECORD_VERSION},
        sort_keys=True,
        separators=(",", ":"),
    )


def decode_record(raw: str) -> str:
    """Return the signed claims held by a stored record."""
    try:
        record = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidTokenError() from exc

    if not isinstance(record, dict) or record.get("v") != STORED_RECORD_VERSION:
        raise InvalidTokenError()

    signed_claims = record.get("jws")
    if not isinstance(signed_claims, str) or not signed_claims:
        raise InvalidTokenError()
    return signed_claims
