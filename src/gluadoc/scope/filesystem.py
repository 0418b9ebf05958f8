"""Filesystem access used by folder detection.

Implementations satisfy :class:`FileSystem` structurally (no
inheritance). Every method degrades to a falsy value instead of
raising, so an unreadable hub file reads as "no match".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...
    def read_text(self, path: str) -> str | None: ...
    def list_dir(self, path: str) -> list[str]: ...


def uri_to_path(uri: str) -> str:
    """Convert a ``file://`` URI to a forward-slash filesystem path.

    Windows drive URIs (``file:///c%3A/addon``) lose the leading slash.
    Anything that is not a file URI is returned with separators
    normalised.
    """
    if not uri.startswith("file://"):
        return uri.replace("\\", "/")
    path = unquote(urlparse(uri).path)
    if len(path) >= 3 and path[0] == "/" and path[2] == ":":
        path = path[1:]
    return path


class LocalFileSystem:
    """Reads straight from disk."""

    def exists(self, path: str) -> bool:
        fs_path = Path(uri_to_path(path))
        try:
            return fs_path.exists()
        except OSError:
            logger.debug("Unreachable path %s", fs_path)
            return False

    def read_text(self, path: str) -> str | None:
        fs_path = Path(uri_to_path(path))
        try:
            return fs_path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            logger.debug("Unreadable file %s", fs_path)
            return None

    def list_dir(self, path: str) -> list[str]:
        fs_path = Path(uri_to_path(path))
        try:
            return sorted(p.name for p in fs_path.iterdir() if p.is_file())
        except OSError:
            return []
