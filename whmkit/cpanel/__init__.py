"""cPanel account-level services."""

from .base import CpanelService
from .file_manager import FileManager

__all__ = ["CpanelService", "FileManager"]
