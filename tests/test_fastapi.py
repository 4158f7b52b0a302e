# tests/test_fastapi.py
from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from pkg_tokens.adapters.memory.store import InMemoryKeyValueStore
from pkg_tokens.domain.constants import TokenType
from pkg_tokens.domain.entities import TokenClaims
from pkg_tokens.integrations.fastapi import bearer_token_from_request, create_fastapi_token_auth

from helpers import expired_token, tamper


@pytest.fixture
def token_auth(settings):
    return create_fastapi_token_auth(settings=settings, store=InMemoryKeyValueStore())


@pytest.fixture
def client(token_auth):
    app = FastAPI()

    @app.get("/me")
    async def me(claims: TokenClaims = Depends(token_auth.get_current_claims)):
        return {"subject": claims.subject}

    @app.get("/maybe")
    async def maybe(claims: TokenClaims | None = Depends(token_auth.get_optional_claims)):
        return {"subject": claims.subject if claims else None}

    return TestClient(app)


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_valid_access_token(client, token_auth):
    token = token_auth.manager.generate_access_token("u2", timedelta(hours=1))

    response = client.get("/me", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json() == {"subject": "u2"}


def test_missing_token(client):
    response = client.get("/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_tampered_token(client, token_auth):
    token = token_auth.manager.generate_access_token("u2", 3600)

    response = client.get("/me", headers=_bearer(tamper(token)))
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_expired_token(client, token_auth):
    token = expired_token("u2", TokenType.ACCESS_TOKEN)

    response = client.get("/me", headers=_bearer(token))
    assert response.status_code == 401
    assert response.json()["detail"] == "Token expired"


def test_optional_claims(client, token_auth):
    token = token_auth.manager.generate_access_token("u2", 3600)

    assert client.get("/maybe").json() == {"subject": None}
    assert client.get("/maybe", headers=_bearer(tamper(token))).json() == {"subject": None}
    assert client.get("/maybe", headers=_bearer(token)).json() == {"subject": "u2"}


def test_raw_authorization_header():
    def _request(value):
        headers = [(b"authorization", value.encode())] if value is not None else []
        return Request({"type": "http", "headers": headers})

    assert bearer_token_from_request(_request("Bearer abc ")) == "abc"
    assert bearer_token_from_request(_request("Bearer   ")) is None
    assert bearer_token_from_request(_request("Basic abc")) is None
    assert bearer_token_from_request(_request(None)) is None
