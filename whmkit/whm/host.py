from typing import Any

from ..base import Service, rename_keys
from ..response import Response

RESTART_KEYS = {"name": "service"}


class Host(Service):
    """Information about, and control of, the WHM host itself."""

    def hostname(self) -> Response:
        return self.perform_request({"api_function": "gethostname", "response_key": "hostname"})

    def version(self) -> Response:
        return self.perform_request({"api_function": "version", "response_key": "version"})

    def load_average(self) -> Response:
        return self.perform_request({"api_function": "loadavg"})

    def disk_info(self) -> Response:
        return self.perform_request({"api_function": "getdiskinfo", "response_key": "partition"})

    def restart_service(self, **options: Any) -> Response:
        """Restart the service given as ``name`` (httpd, exim, mysql, named, ...)."""
        return self.perform_request({"api_function": "restartservice", **rename_keys(options, RESTART_KEYS)})
