"""Panel registration documentation.

``vgui.Register("Name", PANEL, "Base")`` and
``derma.DefineControl("Name", "desc", PANEL, "Base")`` declare a class
whose table was assigned earlier in the file. The class line goes
directly above that assignment, followed by the accessor lines of the
registered table.
"""

from __future__ import annotations

import logging

from gluadoc.config import PluginConfig
from gluadoc.constants import ACCESSOR_TARGET_FALLBACKS, DEFAULT_PANEL_BASE, CallShape
from gluadoc.scanning.arguments import (
    extract_string_literal,
    is_identifier,
    split_arguments,
)
from gluadoc.scanning.call_scanner import find_calls
from gluadoc.scanning.text import (
    assigned_name,
    expand_up_through_blank_lines,
    find_nearest_prior_assignment,
    has_existing_class_doc,
    line_at,
    line_start_at,
)
from gluadoc.synthesis import accessor
from gluadoc.synthesis.doc_lines import format_class_line, to_diff_text
from gluadoc.synthesis.schemas import Registration, TextEdit

logger = logging.getLogger(__name__)


def parse_registration(
    shape: CallShape, args_text: str, position: int = 0
) -> Registration | None:
    parts = split_arguments(args_text, track_parentheses=True)
    table_index = 2 if shape is CallShape.DEFINE_CONTROL else 1
    if len(parts) <= table_index:
        return None

    name = extract_string_literal(parts[0])
    table = parts[table_index]
    if not name or not is_identifier(table):
        return None

    base = None
    if len(parts) > table_index + 1:
        base = extract_string_literal(parts[table_index + 1])
    return Registration(
        shape=shape, name=name, table=table, base=base, position=position
    )


def find_registrations(text: str, config: PluginConfig) -> list[Registration]:
    """Both registration forms, in source order."""
    patterns = config.patterns
    registrations: list[Registration] = []
    for shape, pattern in (
        (CallShape.REGISTER, patterns.vgui_register),
        (CallShape.DEFINE_CONTROL, patterns.derma_define_control),
    ):
        for site in find_calls(text, pattern):
            reg = parse_registration(shape, site.args_text, site.start)
            if reg is not None:
                registrations.append(reg)
    registrations.sort(key=lambda r: r.position)
    return registrations


def has_registrations(text: str, config: PluginConfig) -> bool:
    return bool(find_registrations(text, config))


def synthesize(text: str, config: PluginConfig) -> list[TextEdit]:
    """Class annotations for every registration not yet documented."""
    placed: list[tuple[TextEdit, Registration, int]] = []
    seen_names: set[str] = set()
    seen_starts: set[int] = set()

    for reg in find_registrations(text, config):
        if reg.name in seen_names or has_existing_class_doc(text, reg.name):
            continue
        assign_pos = find_nearest_prior_assignment(
            text, reg.table, reg.position - 1, config.patterns
        )
        if assign_pos is None:
            logger.debug(
                "event=orphaned_registration name=%s table=%s",
                reg.name,
                reg.table,
            )
            continue

        line_start = line_start_at(text, assign_pos)
        if line_start in seen_starts:
            continue
        insert_start = expand_up_through_blank_lines(text, line_start)
        if insert_start == 0:
            # leading blank lines stay put so a table stub at offset 0 sits above
            insert_start = line_start
        class_line = format_class_line(reg.name, reg.base or DEFAULT_PANEL_BASE)
        edit = TextEdit.replacement(
            insert_start, line_start, to_diff_text([class_line])
        )
        placed.append((edit, reg, line_start))
        seen_names.add(reg.name)
        seen_starts.add(line_start)

    placed.sort(key=lambda item: item[0].start)
    edits: list[TextEdit] = []
    for idx, (edit, reg, line_start) in enumerate(placed):
        range_end = (
            placed[idx + 1][0].start - 1 if idx + 1 < len(placed) else len(text)
        )
        table_var = assigned_name(line_at(text, line_start), config.patterns)
        lines = _registered_accessor_lines(
            text, table_var or reg.table, reg.name, config, edit.start, range_end
        )
        if lines:
            class_line = format_class_line(
                reg.name, reg.base or DEFAULT_PANEL_BASE
            )
            edit = edit.model_copy(
                update={"text": to_diff_text([class_line, *lines])}
            )
        edits.append(edit)
    return edits


def _registered_accessor_lines(
    text: str,
    table_var: str,
    class_name: str,
    config: PluginConfig,
    range_start: int,
    range_end: int,
) -> list[str]:
    for target in (table_var, *ACCESSOR_TARGET_FALLBACKS):
        lines = accessor.collect_lines_for_target(
            text,
            target,
            config,
            logical_type=class_name,
            range_start=range_start,
            range_end=range_end,
        )
        if lines:
            return lines
    return []
