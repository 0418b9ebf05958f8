"""NetworkVar / NetworkVarElement documentation.

Networked fields only get accessor methods, documented setter first
and getter second.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gluadoc.config import PluginConfig
from gluadoc.constants import (
    DEFAULT_NETWORK_OWNER,
    NETWORK_ELEMENT_TYPE,
    UNTYPED,
    CallShape,
)
from gluadoc.scanning.arguments import extract_string_literal, split_arguments
from gluadoc.scanning.call_scanner import find_calls
from gluadoc.scanning.text import line_start_at
from gluadoc.synthesis.doc_lines import (
    missing_lines,
    network_var_pair,
    to_diff_text,
)
from gluadoc.synthesis.schemas import NetworkField, TextEdit

logger = logging.getLogger(__name__)


def _is_table(arg: str) -> bool:
    return arg.startswith("{")


def parse_network_var(
    parts: Sequence[str], position: int = 0
) -> NetworkField | None:
    """``(type, name)`` or ``(type, slot, name[, extended])``.

    A string slot followed by nothing or by a table is the name itself.
    """
    if len(parts) < 2:
        return None
    type_tag = extract_string_literal(parts[0]) or parts[0]

    if len(parts) == 2:
        shape = CallShape.NAMED
        name = extract_string_literal(parts[1])
    else:
        shape = CallShape.INDEXED
        name = extract_string_literal(parts[2])
        slot_name = extract_string_literal(parts[1])
        if name is None and slot_name and _is_table(parts[2]):
            shape = CallShape.NAMED
            name = slot_name

    if not name:
        return None
    return NetworkField(
        shape=shape, type_tag=type_tag, name=name, position=position
    )


def parse_network_var_element(
    parts: Sequence[str], position: int = 0
) -> NetworkField | None:
    """``(type, slot, element, name)`` or the short ``(type, slot, name)``.

    When both slot and element are strings the element names the field.
    """
    if len(parts) < 3:
        return None
    type_tag = extract_string_literal(parts[0]) or parts[0]

    if len(parts) == 3:
        name = extract_string_literal(parts[2])
    else:
        name = extract_string_literal(parts[3])
        slot = extract_string_literal(parts[1])
        element = extract_string_literal(parts[2])
        if slot and element:
            name = element

    if not name:
        return None
    return NetworkField(
        shape=CallShape.ELEMENT, type_tag=type_tag, name=name, position=position
    )


def find_network_fields(text: str, config: PluginConfig) -> list[NetworkField]:
    """Both call kinds, in source order."""
    patterns = config.patterns
    fields: list[NetworkField] = []
    for site in find_calls(text, patterns.network_var):
        field = parse_network_var(split_arguments(site.args_text), site.start)
        if field is not None:
            fields.append(field)
    for site in find_calls(text, patterns.network_var_element):
        field = parse_network_var_element(
            split_arguments(site.args_text), site.start
        )
        if field is not None:
            fields.append(field)
    fields.sort(key=lambda f: f.position)
    return fields


def resolve_value_type(field: NetworkField, config: PluginConfig) -> str:
    if field.shape is CallShape.ELEMENT:
        return NETWORK_ELEMENT_TYPE
    return config.dt_types.get(field.type_tag, UNTYPED)


def field_lines(
    field: NetworkField, owner_type: str, config: PluginConfig
) -> list[str]:
    return network_var_pair(
        field.name, owner_type, resolve_value_type(field, config)
    )


def collect_field_doc_lines(
    text: str,
    scope_global: str | None,
    logical_type: str | None,
    config: PluginConfig,
    *,
    range_start: int | None = None,
    range_end: int | None = None,
) -> list[str]:
    """Raw lines for embedding under a class annotation."""
    owner = logical_type or scope_global or DEFAULT_NETWORK_OWNER
    lo = range_start if range_start is not None else 0
    hi = range_end if range_end is not None else len(text) + 1
    lines: list[str] = []
    for field in find_network_fields(text, config):
        if lo <= field.position <= hi:
            lines.extend(field_lines(field, owner, config))
    return lines


def synthesize(
    text: str,
    scope_global: str | None,
    logical_type: str | None,
    config: PluginConfig,
) -> list[TextEdit]:
    """Inline fragments at the start of each declaring line."""
    owner = logical_type or scope_global or DEFAULT_NETWORK_OWNER
    edits: list[TextEdit] = []
    for field in find_network_fields(text, config):
        lines = missing_lines(text, field_lines(field, owner, config))
        if not lines:
            continue
        line_start = line_start_at(text, field.position - 1)
        edits.append(TextEdit.insertion(line_start, to_diff_text(lines)))
    return edits
