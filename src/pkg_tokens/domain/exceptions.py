class TokenError(Exception):
    """Base class for token lifecycle failures."""
    pass


class InvalidTokenError(TokenError):
    """Raised when token is malformed, badly signed, expired or unknown."""

    def __init__(self, message: str = "invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when token signature is valid but its expiry has passed."""

    def __init__(self, message: str = "token has expired") -> None:
        super().__init__(message)


class InvalidTokenTypeError(TokenError):
    """Raised when token type does not match the requested one."""

    def __init__(self, message: str = "invalid token type") -> None:
        super().__init__(message)


class UnexpectedSigningMethodError(TokenError):
    """Raised when token was signed with an algorithm other than the configured one."""

    def __init__(self, message: str = "unexpected token signing method") -> None:
        super().__init__(message)


class TokenNotFoundError(TokenError):
    """Raised by the store bridge when a token key is absent."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)
