from typing import Any

from ..base import Service, rename_keys
from ..response import Response

ADD_ZONE_KEYS = {"owner": "trueowner"}


class Dns(Service):
    """DNS zones served by the WHM host."""

    def add_zone(self, **options: Any) -> Response:
        """Create a zone for ``domain`` pointing at ``ip``.

        ``template`` picks the zone template; ``owner`` sets the account
        that owns the zone.
        """
        return self.perform_request({"api_function": "adddns", **rename_keys(options, ADD_ZONE_KEYS)})

    def remove_zone(self, **options: Any) -> Response:
        return self.perform_request({"api_function": "killdns", **options})

    def list_zones(self) -> Response:
        return self.perform_request({"api_function": "listzones", "response_key": "zone"})

    def dump_zone(self, **options: Any) -> Response:
        return self.perform_request({"api_function": "dumpzone", **options})

    def lookup_nameserver_ip(self, **options: Any) -> Response:
        """Resolve the IP address of ``nameserver``."""
        return self.perform_request({"api_function": "lookupnsip", **options})
