"""Annotation synthesis: recognised calls → doc lines → text edits."""

from gluadoc.synthesis.diff import apply_edits, assemble, resolve_conflicts
from gluadoc.synthesis.pipeline import annotate_text
from gluadoc.synthesis.schemas import TextEdit

__all__ = [
    "TextEdit",
    "annotate_text",
    "apply_edits",
    "assemble",
    "resolve_conflicts",
]
