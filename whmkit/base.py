from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError
from .response import Response
from .server import Server


def rename_keys(options: Mapping[str, Any], table: Mapping[str, str]) -> Dict[str, Any]:
    """Return a copy of ``options`` with keys in ``table`` renamed to wire names.

    Keys missing from ``options`` are not introduced and keys not named in
    ``table`` pass through unchanged. ``options`` itself is never modified.
    """
    renamed: Dict[str, Any] = {}
    for key, value in options.items():
        renamed[table.get(key, key)] = value
    return renamed


class Service:
    """Base for every resource family.

    Built from an existing ``Server`` or from connection settings, e.g.
    ``Account(host="x.x.x.x", hash="...")``.
    """

    def __init__(self, server: Optional[Server] = None, **connection: Any) -> None:
        if server is None:
            if not connection:
                raise ConfigurationError("A server or connection settings are required")
            server = Server(**connection)
        elif connection:
            raise ConfigurationError("Pass either a server or connection settings, not both")
        self.server = server

    def perform_request(self, params: Mapping[str, Any]) -> Response:
        options = dict(params)
        function = options.pop("api_function", None)
        if not function:
            raise ValueError("api_function is required")
        response_key = options.pop("response_key", None)
        return self.server.perform_request(function, options, response_key=response_key)
