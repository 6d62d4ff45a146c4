"""
whmkit: a client for the cPanel/WHM administrative HTTP APIs.

Every service method renames its keyword options into the wire parameter
names the remote API expects, attaches the API function identifier and
delegates to ``Server.perform_request``, which performs the HTTP call and
returns a normalized ``Response``.

Requirements:
    - Python 3
    - requests library
    - beautifulsoup4 (whostmgr screens answer with HTML)

Configuration:
    Pass a ``ConnectionConfig`` (or keyword settings) at construction, or
    build one from the environment with ``ConnectionConfig.from_env()``.
    Required fields: host, hash.
"""

from .base import Service, rename_keys
from .commands import execute_command
from .config import ConnectionConfig
from .cpanel import CpanelService, FileManager
from .errors import ConfigurationError, RemoteError, TransportError, WhmError
from .response import Response, normalize_response
from .server import Server
from .whm import Account, Dns, Host
from .whostmgr import Ssl

__version__ = "1.0.0"

__all__ = [
    "Account",
    "ConfigurationError",
    "ConnectionConfig",
    "CpanelService",
    "Dns",
    "FileManager",
    "Host",
    "RemoteError",
    "Response",
    "Server",
    "Service",
    "Ssl",
    "TransportError",
    "WhmError",
    "execute_command",
    "normalize_response",
    "rename_keys",
    "__version__",
]
