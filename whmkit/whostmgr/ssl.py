from typing import Any, Optional

from ..base import Service, rename_keys
from ..errors import ConfigurationError
from ..response import Response
from ..server import Server

REMOVE_KEYS = {"domain": "host"}


class Ssl(Service):
    """SSL hosts, managed through the privileged whostmgr screens."""

    def __init__(self, server: Optional[Server] = None, **connection: Any) -> None:
        if server is None and connection:
            connection.setdefault("whostmgr", True)
        super().__init__(server, **connection)
        if not self.server.whostmgr:
            raise ConfigurationError("Ssl requires a server in whostmgr mode")

    def remove(self, **options: Any) -> Response:
        """Delete the SSL host installed for ``domain``."""
        return self.perform_request({"api_function": "realrmsslhost", **rename_keys(options, REMOVE_KEYS)})
