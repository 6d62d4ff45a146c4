from typing import Any, Mapping, Optional

from ..base import Service
from ..errors import ConfigurationError
from ..response import Response
from ..server import Server

API_VERSION = 2


class CpanelService(Service):
    """cPanel API 2 calls, proxied through WHM's ``cpanel`` function."""

    api_module = ""

    def __init__(
        self,
        server: Optional[Server] = None,
        api_username: Optional[str] = None,
        **connection: Any,
    ) -> None:
        if not api_username or not str(api_username).strip():
            raise ConfigurationError("api_username is required for cPanel calls")
        super().__init__(server, **connection)
        self.api_username = api_username

    def perform_request(self, params: Mapping[str, Any]) -> Response:
        options = dict(params)
        function = options.pop("api_function", None)
        if not function:
            raise ValueError("api_function is required")
        response_key = options.pop("response_key", None)
        wire = {
            "cpanel_jsonapi_user": self.api_username,
            "cpanel_jsonapi_module": self.api_module,
            "cpanel_jsonapi_func": function,
            "cpanel_jsonapi_apiversion": API_VERSION,
        }
        wire.update(options)
        return self.server.perform_request("cpanel", wire, response_key=response_key)
