"""Assemble, order and apply the edits produced for one file.

Every edit is computed against the original text. The host applies
them in the returned order, highest offset first, so earlier offsets
are never shifted by edits already applied.
"""

from __future__ import annotations

from collections.abc import Sequence

from gluadoc.synthesis.schemas import TextEdit


def resolve_conflicts(edits: Sequence[TextEdit]) -> list[TextEdit]:
    """Move insertions that land inside a replaced range to just after it."""
    ranges = [(e.start, e.finish) for e in edits if not e.is_insertion]
    if not ranges:
        return list(edits)

    resolved: list[TextEdit] = []
    for edit in edits:
        if edit.is_insertion:
            for start, finish in ranges:
                if start <= edit.start <= finish:
                    edit = edit.model_copy(
                        update={"start": finish + 1, "finish": finish}
                    )
                    break
        resolved.append(edit)
    return resolved


def assemble(edits: Sequence[TextEdit]) -> list[TextEdit] | None:
    """Resolve conflicts and sort by descending start; None when empty.

    Edits sharing a start are applied last-emitted first, so their texts
    end up in the file in the order they were emitted.
    """
    if not edits:
        return None
    resolved = resolve_conflicts(edits)
    order = sorted(
        range(len(resolved)),
        key=lambda i: (resolved[i].start, i),
        reverse=True,
    )
    return [resolved[i] for i in order]


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """Apply character-offset edits in the given (descending) order."""
    for edit in edits:
        text = text[: edit.start - 1] + edit.text + text[edit.finish :]
    return text


def to_byte_offsets(text: str, edits: Sequence[TextEdit]) -> list[TextEdit]:
    """Convert character offsets to UTF-8 byte offsets.

    ASCII text is returned unchanged.
    """
    if text.isascii():
        return list(edits)

    def byte_len(end: int) -> int:
        return len(text[:end].encode("utf-8"))

    return [
        e.model_copy(
            update={
                "start": byte_len(e.start - 1) + 1,
                "finish": byte_len(e.finish),
            }
        )
        for e in edits
    ]
