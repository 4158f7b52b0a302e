from __future__ import annotations

from dataclasses import dataclass

from ...domain.constants import TokenType
from ...domain.entities import TokenClaims, new_claims
from ...domain.ports import TokenSigner
from ...domain.value_objects import TTL, normalize_ttl


@dataclass(slots=True)
class AccessTokenService:
    """
    Application use case for stateless access tokens:
    - sign fresh ACCESS_TOKEN claims
    - verify a presented token by signature and expiry alone

    No store interaction.
    """

    signer: TokenSigner

    def generate(self, subject: str, ttl: TTL) -> str:
        claims = new_claims(subject, TokenType.ACCESS_TOKEN)
        return self.signer.sign(claims, normalize_ttl(ttl))

    def verify(self, token: str) -> TokenClaims:
        """
        Raises:
            InvalidTokenError
            TokenExpiredError
            InvalidTokenTypeError
            UnexpectedSigningMethodError
        """
        return self.signer.verify(token, TokenType.ACCESS_TOKEN)

    def decode(self, token: str) -> bool:
        """True when the token is a valid access token; raises otherwise."""
        self.verify(token)
        return True
