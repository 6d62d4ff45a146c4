from typing import Any

from ..base import rename_keys
from ..response import Response
from .base import CpanelService

LIST_KEYS = {
    "directory": "dir",
    "list": "filelist",
    "path": "filepath",
    "need_mime": "needmime",
    "check_leaf": "checkleaf",
    "show_dot_files": "showdotfiles",
}
SHOW_KEYS = {"directory": "dir"}
STAT_KEYS = {"directory": "dir"}
OPERATE_KEYS = {
    "name": "op",
    "decode_uri": "doubledecode",
    "source_files": "sourcefiles",
    "destination_files": "destfiles",
}


class FileManager(CpanelService):
    """File functions of a cPanel account: listing, viewing and file operations.

    Example::

        file_manager = FileManager(host="x.x.x.x", hash="pass", api_username="user")
        file_manager.list(directory="public_html")
    """

    api_module = "Fileman"

    def list(self, **options: Any) -> Response:
        """List files and their attributes inside a directory.

        Options:
            directory: directory to browse, relative to the home directory
                (default: the home directory).
            list: "1" to list only the files named by ``path``.
            path: file to list when ``list`` is "1".
            need_mime: "1" adds ``mimename`` and ``mimetype`` to each entry.
            check_leaf: "1" adds ``isleaf`` (directory without subdirectories).
            show_dot_files: "1" includes dotfiles.
            types: pipe-separated filter of "dir", "file" and "special".
        """
        return self.perform_request({"api_function": "listfiles", **rename_keys(options, LIST_KEYS)})

    def show(self, **options: Any) -> Response:
        """View a file in the home directory, with extra details such as tarball contents.

        Options:
            directory: directory holding the file, relative to the home
                directory (e.g. "public_html/files/").
            file: name of the file to view.
        """
        return self.perform_request({"api_function": "viewfile", **rename_keys(options, SHOW_KEYS)})

    def stat(self, **options: Any) -> Response:
        """Retrieve statistics for files.

        Options:
            directory: directory holding the files (default: the home directory).
            file: file name, or several separated by pipes ("a|b|c").
        """
        return self.perform_request({"api_function": "statfiles", **rename_keys(options, STAT_KEYS)})

    def disk_usage(self) -> Response:
        """Disk usage statistics for the account."""
        return self.perform_request({"api_function": "getdiskinfo"})

    def operate(self, **options: Any) -> Response:
        """Copy, move, rename, chmod, extract, compress, link, unlink or trash files.

        Options:
            name: the operation: "copy", "move", "rename", "chmod", "extract",
                "compress", "link", "unlink" or "trash".
            source_files: comma-separated files to operate on, no spaces.
            destination_files: comma-separated destinations. With several
                sources and destinations, each pair is handled 1-to-1; with a
                single source, the first destination is used.
            decode_uri: "1" URI-decodes ``source_files`` and ``destination_files``.
            metadata: extra value the operation needs, e.g. the archive type
                for "compress" (tar, gz, bz2, zip, tar.gz, tar.bz2) or octal
                permissions for "chmod" (0755).
        """
        return self.perform_request({"api_function": "fileop", **rename_keys(options, OPERATE_KEYS)})
