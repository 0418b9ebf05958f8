"""Class annotations for scripted entities, weapons, effects and tools.

A scripted class file shares one global table (``ENT``, ``SWEP``...).
The file gets a ``---@class <type> : <parent>`` header listing every
accessor and networked field, and a ``local ENT = {}`` stub when the
file never declares the table itself.
"""

from __future__ import annotations

import re

from gluadoc.config import PluginConfig
from gluadoc.constants import BaseKind
from gluadoc.scope.folder_detector import find_base_assignment
from gluadoc.scope.schemas import ClassificationResult, FolderBaseInfo, FolderInfo
from gluadoc.synthesis import accessor, network_var, registration
from gluadoc.synthesis.doc_lines import (
    format_class_line,
    missing_lines,
    to_diff_text,
)
from gluadoc.synthesis.schemas import TextEdit


def resolve_base(
    text: str,
    scope_global: str,
    folder: FolderInfo | None,
    config: PluginConfig,
) -> FolderBaseInfo | None:
    """Folder base when folder-scoped, else the file's own assignment."""
    if folder is not None:
        return FolderBaseInfo(kind=folder.kind, value=folder.value)
    return find_base_assignment(text, scope_global, config.patterns)


def parent_and_stub(
    scope_global: str, base: FolderBaseInfo | None, config: PluginConfig
) -> tuple[str, str]:
    """Parent type for the class line and the table stub initialiser."""
    if base is None:
        return scope_global, "{}"
    if base.kind is BaseKind.IDENTIFIER:
        if base.value == scope_global:
            return scope_global, "{}"
        return base.value, base.value
    if base.value.lower() in config.engine_base_aliases:
        return scope_global, "{}"
    return base.value, "{}"


def synthesize(
    text: str,
    classification: ClassificationResult,
    folder: FolderInfo | None,
    config: PluginConfig,
) -> list[TextEdit]:
    scope_global = classification.scope_name
    logical_type = classification.logical_type_name
    patterns = config.patterns

    has_local = (
        patterns.by_name(patterns.local_assignment_by_name, scope_global).search(
            text
        )
        is not None
    )
    base = resolve_base(text, scope_global, folder, config)
    parent, initialiser = parent_and_stub(scope_global, base, config)
    stub = "" if has_local else f"local {scope_global} = {initialiser}\n\n"

    edits: list[TextEdit] = []
    if registration.has_registrations(text, config):
        if stub:
            edits.append(TextEdit.insertion(0, stub))
        return edits

    field_lines = accessor.collect_field_doc_lines(
        text, scope_global, logical_type, config
    )
    field_lines += network_var.collect_field_doc_lines(
        text, scope_global, logical_type, config
    )

    class_line_end = _existing_class_line_end(text, logical_type)
    if class_line_end is None:
        header = to_diff_text(
            [format_class_line(logical_type, parent), *field_lines]
        )
        edits.append(TextEdit.insertion(0, header + stub))
        return edits

    new_lines = missing_lines(text, field_lines)
    if new_lines and class_line_end < len(text):
        edits.append(
            TextEdit.insertion(class_line_end + 1, to_diff_text(new_lines))
        )
    elif new_lines:
        # class line is the last line of the file
        edits.append(
            TextEdit.insertion(len(text), "\n" + to_diff_text(new_lines))
        )
    if stub:
        edits.append(TextEdit.insertion(0, stub))
    return edits


def _existing_class_line_end(text: str, class_name: str) -> int | None:
    """0-based index of the newline ending the class line, if declared."""
    m = re.search(r"---@class\s+" + re.escape(class_name) + r"[\s:]", text)
    if m is None:
        return None
    line_end = text.find("\n", m.end() - 1)
    return len(text) if line_end == -1 else line_end
