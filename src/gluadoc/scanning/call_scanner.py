"""Locate function calls by prefix pattern and pair their parentheses."""

from __future__ import annotations

import logging
import re

from gluadoc.scanning.schemas import CallSite

logger = logging.getLogger(__name__)


def find_matching_paren(text: str, start: int) -> int | None:
    """Return the index of the ``)`` closing an already-open ``(``.

    ``start`` is the 0-based index of the first character after the
    opening parenthesis. Parentheses inside quoted strings are ignored.
    Returns None when the text ends before the call is closed.
    """
    depth = 1
    in_string = False
    string_char = ""
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if ch == string_char and text[i - 1] != "\\":
                in_string = False
                string_char = ""
        elif ch in ('"', "'"):
            in_string = True
            string_char = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return None


def find_calls(
    text: str, prefix_pattern: str | re.Pattern[str]
) -> list[CallSite]:
    """Find every call whose prefix matches ``prefix_pattern``.

    The pattern must end with an escaped opening parenthesis so the
    argument list start is unambiguous; any other pattern yields no
    calls. Scanning stops at the first unbalanced call: everything
    found before it is still returned.
    """
    source = (
        prefix_pattern.pattern
        if isinstance(prefix_pattern, re.Pattern)
        else prefix_pattern
    )
    if not source.endswith("\\("):
        logger.debug("Call pattern %r is not anchored at '('", source)
        return []
    regex = (
        prefix_pattern
        if isinstance(prefix_pattern, re.Pattern)
        else re.compile(prefix_pattern)
    )

    calls: list[CallSite] = []
    pos = 0
    while True:
        m = regex.search(text, pos)
        if m is None:
            break
        args_start = m.end()
        if text[args_start - 1] != "(":
            logger.debug("Call pattern %r matched without '('", source)
            return []
        close = find_matching_paren(text, args_start)
        if close is None:
            logger.debug(
                "Unbalanced call at offset %d for %r", m.start() + 1, source
            )
            break
        calls.append(
            CallSite(
                args_text=text[args_start:close],
                start=m.start() + 1,
                close=close + 1,
            )
        )
        pos = close + 1
    return calls
