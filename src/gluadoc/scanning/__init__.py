"""Bracket- and string-aware scanning over un-parsed source text."""

from gluadoc.scanning.arguments import (
    extract_numeric,
    extract_string_literal,
    is_identifier,
    split_arguments,
)
from gluadoc.scanning.call_scanner import find_calls, find_matching_paren
from gluadoc.scanning.schemas import CallSite, ClassDocSite

__all__ = [
    "CallSite",
    "ClassDocSite",
    "extract_numeric",
    "extract_string_literal",
    "find_calls",
    "find_matching_paren",
    "is_identifier",
    "split_arguments",
]
