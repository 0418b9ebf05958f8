"""In-memory fake filesystem for testing and for hosts without disk access.

Dict-backed implementation of the FileSystem protocol. Paths are
normalised to forward slashes; reads are counted so tests can assert
on caching.
"""

from __future__ import annotations

from collections import Counter


class FakeFileSystem:
    """Dict-backed FileSystem."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files: dict[str, str | None] = {}
        self.reads: Counter[str] = Counter()
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str, content: str | None) -> None:
        """Add a file; ``None`` content marks it present but unreadable."""
        self._files[path.replace("\\", "/")] = content

    def exists(self, path: str) -> bool:
        return path.replace("\\", "/") in self._files

    def read_text(self, path: str) -> str | None:
        key = path.replace("\\", "/")
        self.reads[key] += 1
        return self._files.get(key)

    def list_dir(self, path: str) -> list[str]:
        prefix = path.replace("\\", "/").rstrip("/") + "/"
        names = [
            p[len(prefix):]
            for p in self._files
            if p.startswith(prefix) and "/" not in p[len(prefix):]
        ]
        return sorted(names)
