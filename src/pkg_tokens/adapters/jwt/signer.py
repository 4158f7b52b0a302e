from datetime import timedelta
from typing import Optional

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
)

from ...domain.constants import SIGNING_ALGORITHM, TokenType
from ...domain.entities import TokenClaims
from ...domain.exceptions import (
    InvalidTokenError,
    InvalidTokenTypeError,
    TokenExpiredError,
    UnexpectedSigningMethodError,
)
from ...domain.ports import TokenSigner
from ...domain.value_objects import SigningKey

_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class JWTTokenSigner(TokenSigner):
    """
    Adapter implementing TokenSigner port using PyJWT with a single HMAC
    algorithm and one pre-shared key.

    Infrastructure layer:
    - Knows about JWT structure and verification.
    - Never trusts the algorithm announced by the token header.
    """

    def __init__(self, key: SigningKey, algorithm: str = SIGNING_ALGORITHM) -> None:
        self._key = key
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def sign(self, claims: TokenClaims, ttl: timedelta) -> str:
        return jwt.encode(
            claims.to_payload(ttl),
            self._key.as_bytes(),
            algorithm=self._algorithm,
        )

    def verify(self, token: str, expected_type: Optional[TokenType] = None) -> TokenClaims:
        """
        Verify signature and expiry, then check the embedded token type.

        Returns:
            TokenClaims carried by the token.

        Raises:
            UnexpectedSigningMethodError
            TokenExpiredError
            InvalidTokenError
            InvalidTokenTypeError
        """
        try:
            headers = jwt.get_unverified_header(token)
        except (DecodeError, JWTInvalidTokenError) as exc:
            raise InvalidTokenError() from exc

        if headers.get("alg") != self._algorithm:
            raise UnexpectedSigningMethodError()

        try:
            payload = jwt.decode(
                token,
                self._key.as_bytes(),
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except (InvalidSignatureError, DecodeError, JWTInvalidTokenError) as exc:
            raise InvalidTokenError() from exc

        claims = TokenClaims.from_payload(payload)

        if expected_type is not None and claims.token_type != expected_type:
            raise InvalidTokenTypeError()

        return claims
