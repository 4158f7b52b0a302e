from enum import IntEnum

# Number of random bytes behind every stateful token key.
TOKEN_BYTE_LENGTH = 32

SIGNING_ALGORITHM = "HS512"

# Version tag of the record written to the key-value store.
STORED_RECORD_VERSION = 1


class TokenType(IntEnum):
    RESET_PASSWORD = 0
    VERIFY_EMAIL = 1
    ACCESS_TOKEN = 2
    REFRESH_TOKEN = 3


# Types that may go through the store-backed path.
STATEFUL_TOKEN_TYPES = frozenset(
    {TokenType.RESET_PASSWORD, TokenType.VERIFY_EMAIL, TokenType.REFRESH_TOKEN}
)
