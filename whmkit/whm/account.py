from typing import Any

from ..base import Service, rename_keys
from ..response import Response

LIST_KEYS = {"search_type": "searchtype"}
USER_KEYS = {"username": "user"}
BANDWIDTH_KEYS = {"search_type": "searchtype"}


class Account(Service):
    """cPanel accounts hosted on the server."""

    def list(self, **options: Any) -> Response:
        """List accounts; ``search`` with ``search_type`` (domain, owner, user, ip, package) filters."""
        params = {"api_function": "listaccts", "response_key": "acct"}
        return self.perform_request({**params, **rename_keys(options, LIST_KEYS)})

    def summary(self, **options: Any) -> Response:
        return self.perform_request(
            {"api_function": "accountsummary", "response_key": "acct", **rename_keys(options, USER_KEYS)}
        )

    def suspend(self, **options: Any) -> Response:
        """Suspend ``username``, optionally recording a ``reason``."""
        return self.perform_request({"api_function": "suspendacct", **rename_keys(options, USER_KEYS)})

    def unsuspend(self, **options: Any) -> Response:
        return self.perform_request({"api_function": "unsuspendacct", **rename_keys(options, USER_KEYS)})

    def disk_usage(self, **options: Any) -> Response:
        return self.perform_request({"api_function": "getdiskusage", **rename_keys(options, USER_KEYS)})

    def bandwidth(self, **options: Any) -> Response:
        """Bandwidth usage, server-wide or filtered by ``search`` and ``search_type``."""
        return self.perform_request(
            {"api_function": "showbw", "response_key": "bandwidth", **rename_keys(options, BANDWIDTH_KEYS)}
        )

    def list_domains(self) -> Response:
        return self.perform_request({"api_function": "listdomains", "response_key": "domain"})
