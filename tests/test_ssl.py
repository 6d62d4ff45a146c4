from __future__ import annotations

from unittest import mock

import pytest
import requests

from conftest import make_response
from whmkit.errors import ConfigurationError, RemoteError, TransportError
from whmkit.server import Server
from whmkit.whostmgr import Ssl


REMOVED_PAGE = """
<html>
  <head><title></title><style>body { color: black; }</style></head>
  <body>
    <div class="okmsg">You have successfully deleted the SSL host</div>
  </body>
</html>
"""

FAILED_PAGE = """
<html>
  <body>
    <div class="errormsg">Error: The SSL host could not be deleted</div>
  </body>
</html>
"""


class TestRemove:
    def test_removes_the_cert(self, whostmgr_server: Server, session: mock.MagicMock) -> None:
        session.request.return_value = make_response(text=REMOVED_PAGE)

        response = Ssl(whostmgr_server).remove(domain="lumberg-test.com")

        assert response["message"] == "You have successfully deleted the SSL host"
        kwargs = session.request.call_args.kwargs
        assert kwargs["url"].endswith("/scripts2/realrmsslhost")
        assert kwargs["data"] == {"host": "lumberg-test.com"}

    def test_error_page_raises_remote_error(self, whostmgr_server: Server, session: mock.MagicMock) -> None:
        session.request.return_value = make_response(text=FAILED_PAGE)

        with pytest.raises(RemoteError) as excinfo:
            Ssl(whostmgr_server).remove(domain="lumberg-test.com")

        assert excinfo.value.message == "Error: The SSL host could not be deleted"

    def test_transport_failure(self, whostmgr_server: Server, session: mock.MagicMock) -> None:
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TransportError):
            Ssl(whostmgr_server).remove(domain="lumberg-test.com")


class TestConstruction:
    def test_rejects_standard_mode_server(self, server: Server) -> None:
        with pytest.raises(ConfigurationError, match="whostmgr"):
            Ssl(server)

    def test_settings_default_to_whostmgr(self) -> None:
        ssl = Ssl(host="whm.example.com", hash="x")

        assert ssl.server.whostmgr is True
