# tests/test_cli.py
import json

import pytest

from pkg_tokens import cli
from pkg_tokens.adapters.memory.store import InMemoryKeyValueStore
from pkg_tokens.cli import main
from pkg_tokens.integrations.common.token_factory import create_token_manager

from helpers import SECRET, tamper


@pytest.fixture(autouse=True)
def token_env(monkeypatch):
    monkeypatch.setenv("PKG_TOKENS_PRIVATE_KEY", SECRET)


def _output(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


def test_issue_and_verify_access(capsys):
    main(["issue-access", "--subject", "u2", "--ttl", "60"])
    issued = _output(capsys)
    assert issued["ok"] is True

    main(["verify-access", issued["token"]])
    verified = _output(capsys)
    assert verified["ok"] is True
    assert verified["claims"]["subject"] == "u2"
    assert verified["claims"]["token_type"] == "access_token"


def test_verify_tampered_access_token(capsys):
    main(["issue-access", "--subject", "u2"])
    token = _output(capsys)["token"]

    with pytest.raises(SystemExit) as exc_info:
        main(["verify-access", tamper(token)])
    assert exc_info.value.code == 1
    assert _output(capsys) == {"ok": False, "error": "invalid token"}


def test_rejects_unknown_token_type():
    with pytest.raises(SystemExit) as exc_info:
        main(["decode", "some-key", "--type", "session"])
    assert exc_info.value.code == 2


def test_missing_private_key(monkeypatch, capsys):
    monkeypatch.delenv("PKG_TOKENS_PRIVATE_KEY")
    with pytest.raises(RuntimeError):
        main(["issue-access", "--subject", "u2"])
    assert _output(capsys)["ok"] is False


class _ClosingMemoryStore(InMemoryKeyValueStore):
    def __init__(self) -> None:
        super().__init__()
        self.closed = 0

    async def close(self) -> None:
        self.closed += 1


@pytest.fixture
def memory_store(monkeypatch):
    store = _ClosingMemoryStore()
    monkeypatch.setattr(
        cli,
        "create_token_manager_from_redis",
        lambda settings: create_token_manager(settings, store),
    )
    return store


def test_issue_decode_revoke(memory_store, capsys):
    main(["issue", "--type", "verify_email", "--subject", "u1", "--ttl", "5"])
    key = _output(capsys)["key"]

    main(["decode", key, "--type", "verify-email"])
    decoded = _output(capsys)
    assert decoded["ok"] is True
    assert decoded["claims"]["subject"] == "u1"
    assert decoded["claims"]["token_type"] == "verify_email"

    with pytest.raises(SystemExit) as exc_info:
        main(["decode", key, "--type", "reset_password"])
    assert exc_info.value.code == 1
    assert _output(capsys) == {"ok": False, "error": "invalid token type"}

    main(["revoke", key])
    assert _output(capsys) == {"ok": True, "revoked": True}

    with pytest.raises(SystemExit) as exc_info:
        main(["decode", key, "--type", "verify_email"])
    assert exc_info.value.code == 1
    assert _output(capsys) == {"ok": False, "error": "invalid token"}

    # the store is closed after every stateful command, failures included
    assert memory_store.closed == 5


def test_issue_rejects_access_type(memory_store, capsys):
    with pytest.raises(ValueError):
        main(["issue", "--type", "access_token", "--subject", "u1"])
    assert _output(capsys)["ok"] is False
    assert memory_store.closed == 1


def test_access_commands_do_not_build_a_store(monkeypatch, capsys):
    def _fail(settings):
        raise AssertionError("store should not be created")

    monkeypatch.setattr(cli, "create_token_manager_from_redis", _fail)

    main(["issue-access", "--subject", "u2"])
    token = _output(capsys)["token"]
    main(["verify-access", token])
    assert _output(capsys)["claims"]["subject"] == "u2"
