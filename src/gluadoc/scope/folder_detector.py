"""Detect folder-scoped types and the base they declare.

A scripted type is either a single file (``entities/my_ent.lua``) or a
folder of files sharing one table (``entities/my_ent/{init,cl_init,
shared}.lua``). For folder types the hub files are read once to find
``<GLOBAL>.Base = ...``; the answer is cached per (folder, scope).
"""

from __future__ import annotations

import logging
from collections import OrderedDict

from gluadoc.config import PatternSet, PluginConfig, ScopeRule
from gluadoc.constants import BaseKind
from gluadoc.scope.filesystem import FileSystem
from gluadoc.scope.schemas import FolderBaseInfo, FolderInfo

logger = logging.getLogger(__name__)


def find_base_assignment(
    content: str, global_name: str, patterns: PatternSet
) -> FolderBaseInfo | None:
    """First ``<global>.Base = ...`` in ``content``, identifier or string."""
    ident = patterns.by_name(
        patterns.base_assignment_by_name, global_name
    ).search(content)
    literal = patterns.by_name(
        patterns.base_string_assignment_by_name, global_name
    ).search(content)
    if literal and (ident is None or literal.start() <= ident.start()):
        return FolderBaseInfo(kind=BaseKind.LITERAL, value=literal.group(1))
    if ident:
        return FolderBaseInfo(kind=BaseKind.IDENTIFIER, value=ident.group(1))
    return None


class FolderDetector:
    """Folder detection with a bounded least-recently-used base cache."""

    def __init__(
        self,
        config: PluginConfig,
        filesystem: FileSystem,
        cache_size: int = 0,
    ) -> None:
        self._config = config
        self._fs = filesystem
        self._cache_size = cache_size  # 0 = unbounded
        self._cache: OrderedDict[tuple[str, str], FolderBaseInfo] = (
            OrderedDict()
        )

    @property
    def cache_len(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def detect(
        self, file_path: str, scope_name: str, logical_type_name: str
    ) -> FolderInfo | None:
        """Return the folder defining this file's type, or None.

        A hub file always makes its directory the folder. Any other
        file counts only when its directory is named after the type
        and holds at least one hub or satellite file.
        """
        rule = self._config.scope_for(scope_name)
        if rule is None:
            return None

        path = file_path.replace("\\", "/")
        directory, sep, filename = path.rpartition("/")
        if not sep:
            return None

        if not self._is_type_folder(
            rule, directory, filename.lower(), logical_type_name
        ):
            return None

        base = self.base_for_folder(directory, rule)
        return FolderInfo(path=directory, kind=base.kind, value=base.value)

    def base_for_folder(self, folder: str, rule: ScopeRule) -> FolderBaseInfo:
        """Base declared by the folder's hub files, cached per scope."""
        key = (folder, rule.global_name)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached

        info = self._read_base(folder, rule)
        self._cache[key] = info
        if self._cache_size and len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return info

    # ── internals ──

    def _is_type_folder(
        self,
        rule: ScopeRule,
        directory: str,
        filename: str,
        logical_type_name: str,
    ) -> bool:
        if filename in rule.hub_filenames:
            return True

        dir_name = directory.rsplit("/", 1)[-1]
        if dir_name.lower() != logical_type_name.lower():
            return False

        for hub in rule.hub_filenames:
            if self._fs.exists(f"{directory}/{hub}"):
                return True
        spec = rule.satellite_spec
        return any(
            spec.match_file(name.lower())
            for name in self._fs.list_dir(directory)
        )

    def _read_base(self, folder: str, rule: ScopeRule) -> FolderBaseInfo:
        for hub in rule.hub_filenames:
            content = self._fs.read_text(f"{folder}/{hub}")
            if content is None:
                continue
            found = find_base_assignment(
                content, rule.global_name, self._config.patterns
            )
            if found is not None:
                return found

        logger.debug(
            "No %s.Base in %s, defaulting to the scope global",
            rule.global_name,
            folder,
        )
        return FolderBaseInfo(kind=BaseKind.LITERAL, value=rule.global_name)
