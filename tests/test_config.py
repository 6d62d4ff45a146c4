from __future__ import annotations

import dataclasses

import pytest

from whmkit.config import ConnectionConfig
from whmkit.errors import ConfigurationError


class TestConnectionConfig:
    def test_ports_follow_ssl_flag(self) -> None:
        assert ConnectionConfig(host="h", hash="x").effective_port == 2087
        assert ConnectionConfig(host="h", hash="x", ssl=False).effective_port == 2086
        assert ConnectionConfig(host="h", hash="x", port=8443).effective_port == 8443

    def test_scheme(self) -> None:
        assert ConnectionConfig(host="h", hash="x").scheme == "https"
        assert ConnectionConfig(host="h", hash="x", ssl=False).scheme == "http"

    def test_credential_strips_line_breaks(self) -> None:
        config = ConnectionConfig(host="h", hash="ab cd\nef\r\ngh\n")
        assert config.credential == "abcdefgh"

    def test_is_immutable(self) -> None:
        config = ConnectionConfig(host="h", hash="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.host = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"hash": "x"}, "host"),
            ({"host": "  ", "hash": "x"}, "host"),
            ({"host": "h"}, "hash"),
            ({"host": "h", "hash": " \n "}, "hash"),
            ({"host": "h", "hash": "x", "user": ""}, "user"),
            ({"host": "h", "hash": "x", "port": 0}, "port"),
            ({"host": "h", "hash": "x", "timeout": -1}, "timeout"),
            ({"host": "h", "hash": "x", "timeout": "5"}, "timeout"),
            ({"host": "h", "hash": "x", "timeout": True}, "timeout"),
            ({"host": "h", "hash": "x", "port": True}, "port"),
            ({"host": "h", "hash": "x", "port": "2087"}, "port"),
            ({"host": "h", "hash": "x", "whostmgr": "false"}, "whostmgr"),
            ({"host": "h", "hash": "x", "ssl": 1}, "ssl"),
        ],
    )
    def test_validate_rejects_bad_settings(self, kwargs, match) -> None:
        with pytest.raises(ConfigurationError, match=match):
            ConnectionConfig(**kwargs).validate()


class TestFromEnv:
    def test_missing_host_returns_none(self, monkeypatch) -> None:
        monkeypatch.delenv("WHM_HOST", raising=False)
        monkeypatch.setenv("WHM_HASH", "secret")
        assert ConnectionConfig.from_env() is None

    def test_reads_all_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("WHM_HOST", "whm.example.com")
        monkeypatch.setenv("WHM_HASH", "secret")
        monkeypatch.setenv("WHM_USER", "reseller")
        monkeypatch.setenv("WHM_WHOSTMGR", "true")
        monkeypatch.setenv("WHM_SSL", "false")
        monkeypatch.setenv("WHM_PORT", "2086")
        monkeypatch.setenv("WHM_VERIFY_SSL", "no")
        monkeypatch.setenv("WHM_TIMEOUT", "12.5")

        config = ConnectionConfig.from_env()

        assert config == ConnectionConfig(
            host="whm.example.com",
            hash="secret",
            user="reseller",
            whostmgr=True,
            ssl=False,
            port=2086,
            verify_ssl=False,
            timeout=12.5,
        )

    def test_defaults(self, monkeypatch) -> None:
        for name in ("WHM_USER", "WHM_WHOSTMGR", "WHM_SSL", "WHM_PORT", "WHM_VERIFY_SSL", "WHM_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("WHM_HOST", "whm.example.com")
        monkeypatch.setenv("WHM_HASH", "secret")

        config = ConnectionConfig.from_env()

        assert config.user == "root"
        assert config.whostmgr is False
        assert config.ssl is True
        assert config.port is None
        assert config.timeout is None

    @pytest.mark.parametrize("name,value", [("WHM_PORT", "https"), ("WHM_TIMEOUT", "soon")])
    def test_unparsable_numbers_are_configuration_errors(self, monkeypatch, name: str, value: str) -> None:
        monkeypatch.setenv("WHM_HOST", "whm.example.com")
        monkeypatch.setenv("WHM_HASH", "secret")
        monkeypatch.delenv("WHM_PORT", raising=False)
        monkeypatch.delenv("WHM_TIMEOUT", raising=False)
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError, match=name):
            ConnectionConfig.from_env()
