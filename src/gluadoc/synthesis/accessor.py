"""AccessorFunc documentation.

``AccessorFunc(target, "m_Key", "Name", FORCE_X)`` generates a
``Get<Name>``/``Set<Name>`` pair and stores the value in
``target.m_Key``. Each call documents the backing field (when keyed)
followed by the setter and getter.
"""

from __future__ import annotations

import logging
import re

from gluadoc.config import PluginConfig
from gluadoc.constants import DEFAULT_ACCESSOR_OWNER, UNTYPED
from gluadoc.scanning.arguments import (
    extract_numeric,
    extract_string_literal,
    split_arguments,
)
from gluadoc.scanning.call_scanner import find_calls
from gluadoc.scanning.text import line_start_at
from gluadoc.synthesis.doc_lines import accessor_pair, missing_lines, to_diff_text
from gluadoc.synthesis.schemas import AccessorCall, TextEdit

logger = logging.getLogger(__name__)

_CONSTANT_NAME = re.compile(r"[A-Za-z_]\w*")


def parse_accessor_args(args_text: str, position: int = 0) -> AccessorCall | None:
    """Parse ``(target, varKey, name[, forceType])``; None without a name."""
    parts = split_arguments(args_text, track_parentheses=True)
    if len(parts) < 3:
        return None
    name = extract_string_literal(parts[2])
    if not name:
        return None
    return AccessorCall(
        target=parts[0],
        var_key=extract_string_literal(parts[1]),
        name=name,
        force_type=parts[3] if len(parts) > 3 else None,
        position=position,
    )


def find_accessor_calls(text: str, config: PluginConfig) -> list[AccessorCall]:
    calls: list[AccessorCall] = []
    for site in find_calls(text, config.patterns.accessor_func):
        call = parse_accessor_args(site.args_text, site.start)
        if call is None:
            logger.debug("Skipping AccessorFunc without a name at %d", site.start)
            continue
        calls.append(call)
    return calls


def resolve_force_type(force_type: str | None, config: PluginConfig) -> str:
    """Map a FORCE_* constant (by name or number) to an annotation type."""
    if not force_type:
        return UNTYPED

    m = _CONSTANT_NAME.search(force_type)
    if m is not None:
        resolved = config.accessor_force_types.get(m.group(0))
        if resolved:
            return resolved

    number = extract_numeric(force_type)
    if number is not None and float(number).is_integer():
        return config.accessor_force_types_by_number.get(int(number), UNTYPED)
    return UNTYPED


def accessor_lines(
    call: AccessorCall, owner_type: str, config: PluginConfig
) -> list[str]:
    value_type = resolve_force_type(call.force_type, config)
    return accessor_pair(call.name, owner_type, value_type, call.var_key)


def collect_field_doc_lines(
    text: str,
    scope_global: str | None,
    logical_type: str | None,
    config: PluginConfig,
) -> list[str]:
    """Lines for every AccessorFunc call, for placing under a class line."""
    owner = logical_type or scope_global or DEFAULT_ACCESSOR_OWNER
    lines: list[str] = []
    for call in find_accessor_calls(text, config):
        lines.extend(accessor_lines(call, owner, config))
    return lines


def collect_lines_for_target(
    text: str,
    target: str,
    config: PluginConfig,
    *,
    scope_global: str | None = None,
    logical_type: str | None = None,
    range_start: int | None = None,
    range_end: int | None = None,
) -> list[str]:
    """Lines for calls on ``target`` whose 1-based position is in range.

    Calls on ``self`` (and on the scope global, when given) are
    accepted too, covering accessors declared inside methods.
    """
    owner = logical_type or scope_global or DEFAULT_ACCESSOR_OWNER
    lo = range_start if range_start is not None else 0
    hi = range_end if range_end is not None else len(text) + 1

    lines: list[str] = []
    for call in find_accessor_calls(text, config):
        if not lo <= call.position <= hi:
            continue
        if call.target not in {target, "self"} and not (
            scope_global and call.target == scope_global
        ):
            continue
        lines.extend(accessor_lines(call, owner, config))
    return lines


def synthesize(
    text: str,
    scope_global: str | None,
    logical_type: str | None,
    config: PluginConfig,
) -> list[TextEdit]:
    """One inline fragment per call, inserted at the start of its line.

    Lines already present in the text are not repeated.
    """
    owner = logical_type or scope_global or DEFAULT_ACCESSOR_OWNER
    edits: list[TextEdit] = []
    for call in find_accessor_calls(text, config):
        lines = missing_lines(text, accessor_lines(call, owner, config))
        if not lines:
            continue
        line_start = line_start_at(text, call.position - 1)
        edits.append(TextEdit.insertion(line_start, to_diff_text(lines)))
    return edits
