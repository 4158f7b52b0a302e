# src/pkg_tokens/cli.py

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Sequence

from .domain.constants import STATEFUL_TOKEN_TYPES, TokenType
from .domain.entities import TokenClaims
from .domain.exceptions import TokenError
from .integrations.common.token_factory import (
    TokenManager,
    create_access_token_service,
    create_token_manager_from_redis,
)
from .settings import settings_from_env

logger = logging.getLogger(__name__)

_STATEFUL_TYPE_NAMES = sorted(t.name.lower() for t in STATEFUL_TOKEN_TYPES)


def _token_type(value: str) -> TokenType:
    try:
        return TokenType[value.strip().upper().replace("-", "_")]
    except KeyError as exc:
        raise argparse.ArgumentTypeError(f"unknown token type: {value!r}") from exc


def _positive_seconds(value: str) -> float:
    seconds = float(value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError("TTL must be positive")
    return seconds


def _claims_summary(claims: TokenClaims) -> dict[str, Any]:
    return {
        "subject": claims.subject,
        "token_type": claims.token_type.name.lower(),
        "created_at": claims.created_at.isoformat(),
        "issued_at": claims.issued_at,
        "expires_at": claims.expires_at,
    }


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-tokens",
        description="Issue, verify and revoke tokens (configured from environment)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    issue_access = sub.add_parser("issue-access", help="Sign a stateless access token.")
    issue_access.add_argument("--subject", "-s", required=True)
    issue_access.add_argument("--ttl", type=_positive_seconds, default=3600.0,
                              help="Lifetime in seconds (default: 3600).")

    verify_access = sub.add_parser("verify-access", help="Verify an access token.")
    verify_access.add_argument("token")

    issue = sub.add_parser("issue", help="Store a revocable token in Redis.")
    issue.add_argument("--type", "-t", dest="token_type", type=_token_type, required=True,
                       help=f"One of: {', '.join(_STATEFUL_TYPE_NAMES)}")
    issue.add_argument("--subject", "-s", required=True)
    issue.add_argument("--ttl", type=_positive_seconds, default=3600.0,
                       help="Lifetime in seconds (default: 3600).")

    decode = sub.add_parser("decode", help="Decode a stored token.")
    decode.add_argument("key")
    decode.add_argument("--type", "-t", dest="token_type", type=_token_type, required=True)

    revoke = sub.add_parser("revoke", help="Delete a stored token.")
    revoke.add_argument("key")

    return parser.parse_args(args=argv)


async def _run_stateful(manager: TokenManager, args: argparse.Namespace) -> dict[str, Any]:
    try:
        if args.command == "issue":
            key = await manager.issue_token(args.subject, args.token_type, args.ttl)
            return {"key": key}
        if args.command == "decode":
            claims = await manager.decode_token(args.key, args.token_type)
            return {"claims": _claims_summary(claims)}
        await manager.destroy_token(args.key)
        return {"revoked": True}
    finally:
        await manager.close()


def _run(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()

    if args.command in {"issue-access", "verify-access"}:
        access = create_access_token_service(settings)
        if args.command == "issue-access":
            return {"token": access.generate(args.subject, args.ttl)}
        return {"claims": _claims_summary(access.verify(args.token))}

    manager = create_token_manager_from_redis(settings)
    logger.debug("Running %s against %s", args.command, settings.redis_url)
    return asyncio.run(_run_stateful(manager, args))


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        summary = _run(args)
        json.dump({"ok": True, **summary}, sys.stdout, indent=2)
        sys.stdout.write("\n")
    except TokenError as exc:
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise SystemExit(1) from exc
    except Exception as exc:  # noqa: BLE001
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise


if __name__ == "__main__":
    main()
