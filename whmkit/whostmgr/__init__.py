"""Services that need the privileged whostmgr namespace."""

from .ssl import Ssl

__all__ = ["Ssl"]
