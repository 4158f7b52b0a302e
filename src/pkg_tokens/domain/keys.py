import secrets

from .constants import TOKEN_BYTE_LENGTH


def generate_token_key(byte_length: int = TOKEN_BYTE_LENGTH) -> str:
    """
    Random URL-safe string built from `byte_length` bytes of the OS CSPRNG.

    Errors from the random source propagate.
    """
    if byte_length < 1:
        raise ValueError(f"byte_length must be positive, got {byte_length}")
    return secrets.token_urlsafe(byte_length)
