import logging
from typing import Any, Dict, Optional

import requests

from .config import ConnectionConfig
from .errors import ConfigurationError, RemoteError, TransportError
from .response import Response, normalize_html, normalize_response

LOGGER = logging.getLogger(__name__)

JSON_API_PATH = "json-api"
WHOSTMGR_PATH = "scripts2"


class Server:
    """Executes WHM requests against one fixed endpoint.

    Standard mode issues ``GET /json-api/<function>`` with query parameters.
    Whostmgr mode issues ``POST /scripts2/<function>`` with a form body.
    Every call is a single round trip: nothing is retried or cached.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        session: Optional[requests.Session] = None,
        **connection: Any,
    ) -> None:
        if config is None:
            try:
                config = ConnectionConfig(**connection)
            except TypeError as exc:
                raise ConfigurationError(str(exc)) from exc
        elif connection:
            raise ConfigurationError("Pass either a ConnectionConfig or keyword settings, not both")
        if not isinstance(config, ConnectionConfig):
            raise ConfigurationError(f"Expected ConnectionConfig, got {type(config).__name__}")
        config.validate()
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        """Close the session, unless it was handed in by the caller."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def whostmgr(self) -> bool:
        return self.config.whostmgr

    @property
    def base_url(self) -> str:
        path = WHOSTMGR_PATH if self.whostmgr else JSON_API_PATH
        return f"{self.config.scheme}://{self.config.host}:{self.config.effective_port}/{path}"

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"WHM {self.config.user}:{self.config.credential}"}

    def perform_request(
        self,
        function: str,
        params: Optional[Dict[str, Any]] = None,
        response_key: Optional[str] = None,
    ) -> Response:
        """Call ``function`` remotely and return the normalized response.

        Raises TransportError when no response arrives, RemoteError when the
        response is an HTTP error, is malformed, or reports failure.
        """
        if not isinstance(function, str) or not function.strip():
            raise ValueError("function must be a non-empty string")

        wire = {k: v for k, v in (params or {}).items() if v is not None}
        url = f"{self.base_url}/{function}"
        method = "POST" if self.whostmgr else "GET"
        LOGGER.debug("Sending %s request to %s", method, url)

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=None if self.whostmgr else wire,
                data=wire if self.whostmgr else None,
                headers=self._headers(),
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
        except requests.exceptions.SSLError as exc:
            LOGGER.error("TLS failure talking to %s: %s", self.config.host, exc)
            raise TransportError(f"SSL Error: {exc}. Check verify_ssl setting.") from exc
        except requests.exceptions.Timeout as exc:
            LOGGER.error("Request to %s timed out", self.config.host)
            raise TransportError(f"Request to {self.config.host} timed out") from exc
        except requests.exceptions.ConnectionError as exc:
            LOGGER.error("Cannot reach host %s: %s", self.config.host, exc)
            raise TransportError(f"Cannot reach host: {self.config.host}") from exc
        except requests.exceptions.RequestException as exc:
            LOGGER.error("Request to %s failed: %s", self.config.host, exc)
            raise TransportError(f"API request failed: {exc}") from exc

        return self._interpret(response, response_key)

    def _interpret(self, response: requests.Response, response_key: Optional[str]) -> Response:
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            LOGGER.warning("WHM answered HTTP %s", response.status_code)
            raise RemoteError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:
            if not self.whostmgr:
                raise RemoteError(
                    "Response body is not valid JSON", status_code=response.status_code
                ) from exc
            result = normalize_html(response.text)
        else:
            result = normalize_response(body, response_key=response_key)
        if not result.status:
            LOGGER.warning("WHM API Error: %s", result.message or "Unknown")
            raise RemoteError(
                result.message or "Unknown",
                status_code=response.status_code,
                response=result,
            )
        return result
