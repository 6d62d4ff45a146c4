"""WHM json-api services."""

from .account import Account
from .dns import Dns
from .host import Host

__all__ = ["Account", "Dns", "Host"]
