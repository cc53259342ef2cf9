from __future__ import annotations

import pytest

from mockconn import MockConnection
from mockconn.config import get_connection_settings
from mockconn.config.defaults import DEFAULT_LOCAL_ADDRESS, DEFAULT_REMOTE_ADDRESS
from mockconn.config.env import (
    LOCAL_ADDRESS_ENV,
    LOG_JSON_ENV,
    REMOTE_ADDRESS_ENV,
    env_address,
    env_flag,
    parse_address,
)


def test_defaults_without_env() -> None:
    settings = get_connection_settings()
    assert settings.local_address == ("127.0.0.1", 12345)
    assert settings.remote_address == ("127.0.0.1", 8080)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10.0.0.1:80", ("10.0.0.1", 80)),
        (" example.test:443 ", ("example.test", 443)),
        ("[::1]:9000", ("::1", 9000)),
    ],
)
def test_parse_address(text, expected) -> None:
    assert parse_address(text) == expected


@pytest.mark.parametrize("text", ["nohost", ":80", "host:port", "host:70000"])
def test_parse_address_rejects_malformed(text) -> None:
    with pytest.raises(ValueError):
        parse_address(text)


def test_env_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv(REMOTE_ADDRESS_ENV, "192.0.2.7:25")
    settings = get_connection_settings()
    assert settings.remote_address == ("192.0.2.7", 25)
    assert settings.local_address == DEFAULT_LOCAL_ADDRESS


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv(LOCAL_ADDRESS_ENV, "192.0.2.1:1")
    settings = get_connection_settings({"local_address": ("10.1.1.1", 2), "remote_address": None})
    assert settings.local_address == ("10.1.1.1", 2)
    assert settings.remote_address == DEFAULT_REMOTE_ADDRESS


def test_blank_env_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv(LOCAL_ADDRESS_ENV, "   ")
    assert env_address(LOCAL_ADDRESS_ENV) is None


def test_env_flag(monkeypatch) -> None:
    assert env_flag(LOG_JSON_ENV, True) is True
    monkeypatch.setenv(LOG_JSON_ENV, "off")
    assert env_flag(LOG_JSON_ENV, True) is False
    monkeypatch.setenv(LOG_JSON_ENV, "1")
    assert env_flag(LOG_JSON_ENV, False) is True


def test_connection_addresses(monkeypatch) -> None:
    monkeypatch.setenv(LOCAL_ADDRESS_ENV, "192.0.2.9:5000")
    conn = MockConnection(remote_address=("198.51.100.1", 21))
    assert conn.local_address == ("192.0.2.9", 5000)
    assert conn.getsockname() == conn.local_address
    assert conn.getpeername() == ("198.51.100.1", 21)
    conn.remote_address = ("203.0.113.5", 22)
    assert conn.getpeername() == ("203.0.113.5", 22)
    conn.local_address = ("203.0.113.6", 23)
    assert conn.getsockname() == ("203.0.113.6", 23)
