import pytest

from pkg_tokens.adapters.jwt.signer import JWTTokenSigner
from pkg_tokens.adapters.memory.store import InMemoryKeyValueStore
from pkg_tokens.domain.value_objects import SigningKey
from pkg_tokens.integrations.common.token_factory import create_token_manager
from pkg_tokens.settings import TokenManagerSettings

from helpers import SECRET, ManualClock


@pytest.fixture
def signer():
    return JWTTokenSigner(SigningKey(SECRET))


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def settings():
    return TokenManagerSettings(private_key=SECRET)


@pytest.fixture
def manager(settings, store):
    return create_token_manager(settings, store)
