"""Annotation line templates shared by every synthesizer.

These strings are consumed by the language server's doc-comment
parser; keep them byte-for-byte stable.
"""

from __future__ import annotations

from collections.abc import Iterable


def format_class_line(name: str, base: str) -> str:
    return f"---@class {name} : {base}"


def format_setter_line(name: str, owner_type: str, value_type: str) -> str:
    return f"---@field Set{name} fun(self: {owner_type}, value: {value_type})"


def format_getter_line(name: str, owner_type: str, value_type: str) -> str:
    return f"---@field Get{name} fun(self: {owner_type}): {value_type}"


def format_backing_field_line(
    var_key: str, value_type: str, visibility: str | None = None
) -> str:
    if visibility:
        return f"---@field {visibility} {var_key} {value_type}"
    return f"---@field {var_key} {value_type}"


def accessor_pair(
    name: str, owner_type: str, value_type: str, var_key: str | None = None
) -> list[str]:
    """Backing field (when keyed), then setter, then getter."""
    lines: list[str] = []
    if var_key:
        lines.append(format_backing_field_line(var_key, value_type))
    lines.append(format_setter_line(name, owner_type, value_type))
    lines.append(format_getter_line(name, owner_type, value_type))
    return lines


def network_var_pair(name: str, owner_type: str, value_type: str) -> list[str]:
    """Setter, then getter. No backing field for networked values."""
    return [
        format_setter_line(name, owner_type, value_type),
        format_getter_line(name, owner_type, value_type),
    ]


def to_diff_text(lines: Iterable[str]) -> str:
    """Join with newlines and end with exactly one."""
    return "\n".join(lines) + "\n"


def missing_lines(text: str, lines: Iterable[str]) -> list[str]:
    """Drop lines already present in ``text`` (and repeats within ``lines``)."""
    existing = {line.strip() for line in text.splitlines()}
    result: list[str] = []
    for line in lines:
        if line in existing:
            continue
        existing.add(line)
        result.append(line)
    return result
