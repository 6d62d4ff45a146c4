import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

SSL_PORT = 2087
PLAIN_PORT = 2086


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class ConnectionConfig:
    """Endpoint and credentials a server talks to.

    ``hash`` accepts either a WHM remote access hash (the multi-line blob
    from ``/root/.accesshash``) or an API token. ``whostmgr`` selects the
    privileged ``scripts2`` namespace instead of ``json-api``.
    """

    host: str = ""
    hash: str = ""
    user: str = "root"
    whostmgr: bool = False
    ssl: bool = True
    port: Optional[int] = None
    verify_ssl: bool = True
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> Optional["ConnectionConfig"]:
        host = os.getenv("WHM_HOST")
        access_hash = os.getenv("WHM_HASH")
        if not host or not access_hash:
            return None
        port = os.getenv("WHM_PORT")
        timeout = os.getenv("WHM_TIMEOUT")
        try:
            port_value = int(port) if port else None
            timeout_value = float(timeout) if timeout else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid WHM_PORT or WHM_TIMEOUT: {exc}") from exc
        return cls(
            host=host,
            hash=access_hash,
            user=os.getenv("WHM_USER", "root"),
            whostmgr=_env_flag("WHM_WHOSTMGR", False),
            ssl=_env_flag("WHM_SSL", True),
            port=port_value,
            verify_ssl=_env_flag("WHM_VERIFY_SSL", True),
            timeout=timeout_value,
        )

    @property
    def effective_port(self) -> int:
        if self.port is not None:
            return self.port
        return SSL_PORT if self.ssl else PLAIN_PORT

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def credential(self) -> str:
        # Access hashes are stored wrapped over several lines
        return "".join(self.hash.split())

    def validate(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ConfigurationError("host must be a non-empty string")
        if not isinstance(self.hash, str) or not self.credential:
            raise ConfigurationError("hash must be a non-empty string")
        if not isinstance(self.user, str) or not self.user.strip():
            raise ConfigurationError("user must be a non-empty string")
        if not isinstance(self.whostmgr, bool):
            raise ConfigurationError(f"whostmgr must be a bool, got {self.whostmgr!r}")
        if not isinstance(self.ssl, bool):
            raise ConfigurationError(f"ssl must be a bool, got {self.ssl!r}")
        if self.port is not None and (
            isinstance(self.port, bool) or not isinstance(self.port, int) or self.port <= 0
        ):
            raise ConfigurationError(f"port must be a positive integer, got {self.port!r}")
        if self.timeout is not None and (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise ConfigurationError(f"timeout must be positive, got {self.timeout!r}")
