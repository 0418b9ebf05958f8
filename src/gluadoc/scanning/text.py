"""Line and assignment helpers over raw source text.

All positions here are 0-based string indices.
"""

from __future__ import annotations

import re

from gluadoc.config import PatternSet
from gluadoc.scanning.schemas import ClassDocSite


def line_start_at(text: str, pos: int) -> int:
    """Index of the first character of the line containing ``pos``."""
    if pos <= 0:
        return 0
    return text.rfind("\n", 0, pos) + 1


def line_at(text: str, pos: int) -> str:
    """The full line containing ``pos``, without its newline."""
    start = line_start_at(text, pos)
    end = text.find("\n", start)
    return text[start:] if end == -1 else text[start:end]


def expand_up_through_blank_lines(text: str, line_start: int) -> int:
    """Move ``line_start`` up over any whitespace-only lines above it."""
    insert_start = line_start
    while insert_start > 0:
        prev_end = insert_start - 1  # the newline ending the previous line
        prev_start = text.rfind("\n", 0, prev_end) + 1
        if text[prev_start:prev_end].strip():
            break
        insert_start = prev_start
    return insert_start


def has_existing_class_doc(text: str, class_name: str) -> bool:
    """True if ``---@class <class_name>`` is already declared anywhere."""
    if not class_name:
        return False
    pattern = r"---@class\s+" + re.escape(class_name) + r"[\s:]"
    return re.search(pattern, text) is not None


def find_nearest_prior_assignment(
    text: str, table_name: str, before: int, patterns: PatternSet
) -> int | None:
    """Position of the last assignment to ``table_name`` before ``before``.

    Local declarations report the position of ``local``; plain
    assignments must start a line and report that line's start.
    The nearest of the two wins.
    """
    if not table_name:
        return None

    last_local: int | None = None
    local_re = patterns.by_name(patterns.local_assignment_by_name, table_name)
    for m in local_re.finditer(text):
        if m.start() >= before:
            break
        last_local = m.start()

    last_global: int | None = None
    global_re = re.compile(
        r"^[ \t]*" + re.escape(table_name) + r"\s*=(?!=)", re.MULTILINE
    )
    for m in global_re.finditer(text):
        if m.start() >= before:
            break
        last_global = m.start()

    candidates = [p for p in (last_local, last_global) if p is not None]
    return max(candidates) if candidates else None


def assigned_name(line: str, patterns: PatternSet) -> str | None:
    """Name assigned by ``line`` (``local X =`` first, then ``X =``)."""
    stripped = line.lstrip()
    m = re.match(patterns.local_assignment, stripped)
    if m is None:
        m = re.match(patterns.variable_assignment, stripped)
    return m.group(1) if m else None


def next_nonblank_line(text: str, pos: int) -> str:
    """The line starting at ``pos``, or the one after it if blank."""
    end = text.find("\n", pos)
    line = text[pos:] if end == -1 else text[pos:end]
    if line.strip() or end == -1:
        return line
    nxt = text.find("\n", end + 1)
    return text[end + 1 :] if nxt == -1 else text[end + 1 : nxt]


def find_class_docs(text: str, patterns: PatternSet) -> list[ClassDocSite]:
    """Every ``---@class`` line, with the table assigned just below it.

    One blank line between the annotation and the assignment is
    tolerated; anything else leaves ``table_var`` unset.
    """
    sites: list[ClassDocSite] = []
    for m in re.finditer(patterns.class_doc, text):
        # the delimiter may itself be the newline ending the line
        line_end = text.find("\n", m.end() - 1)
        if line_end == -1:
            line_end = len(text)
        table_var = None
        if line_end < len(text):
            following = next_nonblank_line(text, line_end + 1)
            table_var = assigned_name(following, patterns)
        sites.append(
            ClassDocSite(
                class_name=m.group(1),
                line_end=line_end,
                table_var=table_var,
            )
        )
    return sites
