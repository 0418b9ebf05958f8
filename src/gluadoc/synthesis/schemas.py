"""Pydantic models for recognised calls and the edits built from them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from gluadoc.constants import CallShape, EditKind


class TextEdit(BaseModel):
    """One edit against the original text, in the host's offset convention.

    Offsets are 1-based and inclusive. ``finish < start`` is a pure
    insertion before ``start``; otherwise ``text`` replaces the
    characters ``start..finish``.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    finish: int
    text: str

    @classmethod
    def insertion(cls, pos: int, text: str) -> TextEdit:
        """Insert before the 0-based index ``pos``."""
        return cls(start=pos + 1, finish=pos, text=text)

    @classmethod
    def replacement(cls, start: int, end: int, text: str) -> TextEdit:
        """Replace the 0-based half-open slice ``[start, end)``."""
        return cls(start=start + 1, finish=end, text=text)

    @property
    def kind(self) -> EditKind:
        if self.finish < self.start:
            return EditKind.INSERT
        return EditKind.REPLACE

    @property
    def is_insertion(self) -> bool:
        return self.kind is EditKind.INSERT


class AccessorCall(BaseModel):
    """A parsed ``AccessorFunc(target, key, name[, force])`` call."""

    model_config = ConfigDict(frozen=True)

    target: str
    var_key: str | None
    name: str
    force_type: str | None
    position: int  # 1-based start of the call match


class NetworkField(BaseModel):
    """A parsed ``NetworkVar``/``NetworkVarElement`` declaration."""

    model_config = ConfigDict(frozen=True)

    shape: CallShape
    type_tag: str
    name: str
    position: int


class Registration(BaseModel):
    """A panel registration and the table it registers."""

    model_config = ConfigDict(frozen=True)

    shape: CallShape
    name: str
    table: str
    base: str | None
    position: int
