from typing import Any, Optional


class WhmError(Exception):
    """Base class for every error raised by whmkit."""


class ConfigurationError(WhmError):
    """Connection configuration is missing or invalid. Raised before any request."""


class TransportError(WhmError):
    """The request never produced an interpretable response."""


class RemoteError(WhmError):
    """The remote system answered, but with a failure or a malformed payload."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
