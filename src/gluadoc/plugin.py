"""Host-facing entry points.

One :class:`Plugin` is built per language-server process and passed
around explicitly. It owns the lazily loaded configuration and the
folder-base cache; nothing else is shared between invocations.

Each entry point is a per-file boundary: scan failures are logged and
become "no result", except configuration errors, which propagate.
"""

from __future__ import annotations

import logging
import time

import tree_sitter

from gluadoc.binding.binder import bind_tree
from gluadoc.binding.sink import DocumentationSink
from gluadoc.config import PluginConfig, Settings, load_plugin_config
from gluadoc.logger import ScanLogger
from gluadoc.resilience.errors import classify_error, is_fatal
from gluadoc.scope.classifier import classify
from gluadoc.scope.filesystem import FileSystem, LocalFileSystem, uri_to_path
from gluadoc.scope.folder_detector import FolderDetector
from gluadoc.synthesis.diff import to_byte_offsets
from gluadoc.synthesis.pipeline import annotate_text
from gluadoc.synthesis.schemas import TextEdit

logger = logging.getLogger(__name__)


class Plugin:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        config: PluginConfig | None = None,
        filesystem: FileSystem | None = None,
        scan_logger: ScanLogger | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._config = config
        self._fs: FileSystem = filesystem or LocalFileSystem()
        self._detector: FolderDetector | None = None
        if scan_logger is None and self.settings.log_dir is not None:
            scan_logger = ScanLogger(self.settings.log_dir, self.settings.log_level)
        self._scan_logger = scan_logger

    @property
    def config(self) -> PluginConfig:
        """Loaded on first use; raises ConfigurationError if invalid."""
        if self._config is None:
            self._config = load_plugin_config(self.settings.config_path)
        return self._config

    @property
    def folder_detector(self) -> FolderDetector:
        if self._detector is None:
            self._detector = FolderDetector(
                self.config, self._fs, self.settings.folder_cache_size
            )
        return self._detector

    # ── text pass ──

    def on_set_text(self, uri: str, text: str) -> list[TextEdit] | None:
        """Edits for the new document text, highest offset first."""
        config = self.config
        t0 = time.perf_counter()
        try:
            edits = self._annotate(uri, text, config)
        except Exception as exc:
            if is_fatal(exc):
                raise
            self._log_failure(uri, "set_text", exc)
            return None

        if self._scan_logger is not None:
            self._scan_logger.log_scan(
                uri,
                len(edits or []),
                round((time.perf_counter() - t0) * 1000, 2),
            )
        return edits

    def _annotate(
        self, uri: str, text: str, config: PluginConfig
    ) -> list[TextEdit] | None:
        path = uri_to_path(uri)
        classification = classify(path, config.scopes)
        folder = None
        if classification is not None:
            folder = self.folder_detector.detect(
                path,
                classification.scope_name,
                classification.logical_type_name,
            )

        edits = annotate_text(
            text,
            config,
            classification,
            folder,
            skip_meta_files=self.settings.skip_meta_files,
        )
        if edits and self.settings.byte_offsets:
            edits = to_byte_offsets(text, edits)
        return edits

    # ── tree pass ──

    def on_transform_ast(
        self, uri: str, tree: tree_sitter.Tree, sink: DocumentationSink
    ) -> int:
        """Bind class and field docs; returns the number accepted."""
        config = self.config
        try:
            return bind_tree(uri_to_path(uri), tree, sink, config)
        except Exception as exc:
            if is_fatal(exc):
                raise
            self._log_failure(uri, "transform_ast", exc)
            return 0

    # ── other hooks ──

    def resolve_require(
        self, workspace_uri: str, name: str, calling_uri: str | None = None
    ) -> list[str] | None:
        """Resolve ``include("file.lua")`` style requires.

        A file next to the caller wins; otherwise the name is taken
        relative to the workspace's ``lua/`` directory.
        """
        if not name.endswith(".lua"):
            return None
        if calling_uri is not None:
            calling_dir = calling_uri.rsplit("/", 1)[0]
            relative = f"{calling_dir}/{name}"
            if self._fs.exists(uri_to_path(relative)):
                return [relative]
        return [f"{workspace_uri.rstrip('/')}/lua/{name}"]

    def infer_param_type(self, name: str) -> str | None:
        """Type for a parameter purely from its name, if configured."""
        return self.config.param_name_types.get(name.lower())

    def _log_failure(self, uri: str, stage: str, exc: Exception) -> None:
        error_class = classify_error(exc)
        logger.warning(
            "event=scan_failed stage=%s uri=%s error_class=%s",
            stage,
            uri,
            error_class.value,
            exc_info=True,
        )
        if self._scan_logger is not None:
            self._scan_logger.log_error(uri, stage, error_class.value, str(exc))
