from __future__ import annotations

import json
from typing import Any, Optional
from unittest import mock

import pytest
import requests

from whmkit.config import ConnectionConfig
from whmkit.server import Server


def make_response(body: Any = None, status_code: int = 200, text: Optional[str] = None) -> requests.Response:
    """Build a real requests.Response carrying ``body`` as JSON (or raw ``text``)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Internal Server Error"
    resp.url = "https://whm.example.com:2087/json-api/test"
    resp.encoding = "utf-8"
    if text is None:
        text = json.dumps(body)
    resp._content = text.encode("utf-8")
    return resp


@pytest.fixture
def session() -> mock.MagicMock:
    fake = mock.MagicMock(spec=requests.Session)
    fake.request.return_value = make_response({"status": 1, "statusmsg": "ok"})
    return fake


@pytest.fixture
def config() -> ConnectionConfig:
    return ConnectionConfig(host="whm.example.com", hash="abc\ndef\n")


@pytest.fixture
def server(config: ConnectionConfig, session: mock.MagicMock) -> Server:
    return Server(config, session=session)


@pytest.fixture
def whostmgr_server(session: mock.MagicMock) -> Server:
    return Server(ConnectionConfig(host="whm.example.com", hash="abc", whostmgr=True), session=session)
