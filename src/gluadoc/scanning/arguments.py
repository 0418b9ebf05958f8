"""Split call argument text into top-level argument expressions.

String detection is deliberately simple: a quote closes the string it
opened unless the character right before it is a backslash. Escaped
backslashes before a closing quote (``"a\\\\"``) are not recognised,
and concatenations are kept as one opaque argument.
"""

from __future__ import annotations

import math
import re

_DOUBLE_QUOTED = re.compile(r'\s*"([^"]+)"\s*')
_SINGLE_QUOTED = re.compile(r"\s*'([^']+)'\s*")
_DOTTED_NAME = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*")


def split_arguments(
    args_text: str, *, track_parentheses: bool = False
) -> list[str]:
    """Split ``args_text`` on top-level commas and trim each part.

    Commas inside quoted strings never split. With
    ``track_parentheses`` commas inside nested parentheses don't
    split either (``f(a, b), c`` is two arguments).
    Whitespace-only input yields no arguments.
    """
    parts: list[str] = []
    current: list[str] = []
    in_string = False
    string_char = ""
    depth = 0

    for i, char in enumerate(args_text):
        if in_string:
            current.append(char)
            if char == string_char and args_text[i - 1] != "\\":
                in_string = False
                string_char = ""
            continue

        if char in ('"', "'"):
            in_string = True
            string_char = char
            current.append(char)
        elif track_parentheses and char == "(":
            depth += 1
            current.append(char)
        elif track_parentheses and char == ")":
            depth -= 1
            current.append(char)
        elif char == "," and (not track_parentheses or depth == 0):
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def extract_string_literal(arg: str) -> str | None:
    """Return the content of a bare quoted literal, else None."""
    m = _DOUBLE_QUOTED.fullmatch(arg) or _SINGLE_QUOTED.fullmatch(arg)
    return m.group(1) if m else None


def extract_numeric(arg: str) -> int | float | None:
    """Parse a Lua numeral (decimal, float or hex); None if not a number."""
    text = arg.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    if text.lower().startswith(("0x", "-0x")):
        try:
            return int(text, 16)
        except ValueError:
            return None
    try:
        value = float(text)
    except ValueError:
        return None
    # Lua's tonumber rejects inf/nan spellings
    return value if math.isfinite(value) else None


def is_identifier(arg: str) -> bool:
    """True for a plain or dotted Lua name (``PANEL``, ``self.Inner``)."""
    return _DOTTED_NAME.fullmatch(arg) is not None
