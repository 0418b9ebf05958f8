"""Infer a file's scope and logical type name from its path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from gluadoc.config import ScopeRule
from gluadoc.scope.schemas import ClassificationResult


@dataclass(frozen=True)
class _ScopeMatch:
    scope_name: str
    end_index: int  # index of the last matched folder segment
    length: int


def split_path(file_path: str) -> list[str]:
    """Split on either separator, dropping empty segments."""
    return [seg for seg in file_path.replace("\\", "/").split("/") if seg]


def classify(
    file_path: str, scope_rules: Sequence[ScopeRule]
) -> ClassificationResult | None:
    """Match ``file_path`` against the scope folders.

    Matching is case-insensitive; the returned type name keeps the
    path's original case. For each rule the occurrence nearest the end
    of the path counts; across rules the latest-ending match wins, then
    the longer folder. A file directly inside the scope folder is named
    after its stem (``entities/my_ent.lua`` → ``my_ent``); deeper files
    belong to the first directory after the folder
    (``entities/my_ent/init.lua`` → ``my_ent``).
    """
    segments = split_path(file_path)
    if not segments:
        return None
    lowered = [seg.lower() for seg in segments]

    best = _best_match(lowered, scope_rules)
    if best is None:
        return None

    type_name = _type_name(segments, best.end_index)
    if not type_name:
        return None
    return ClassificationResult(
        scope_name=best.scope_name, logical_type_name=type_name
    )


def _best_match(
    lowered: list[str], scope_rules: Sequence[ScopeRule]
) -> _ScopeMatch | None:
    best: _ScopeMatch | None = None
    for rule in scope_rules:
        folder = rule.folder_segments
        flen = len(folder)
        if flen == 0:
            continue
        # nearest occurrence first: walk candidate starts backwards
        for i in range(len(lowered) - flen, -1, -1):
            if tuple(lowered[i : i + flen]) != folder:
                continue
            end_index = i + flen - 1
            if (
                best is None
                or end_index > best.end_index
                or (end_index == best.end_index and flen > best.length)
            ):
                best = _ScopeMatch(rule.global_name, end_index, flen)
            break
    return best


def _type_name(segments: list[str], end_index: int) -> str | None:
    after = end_index + 1
    if after >= len(segments):
        return None
    if after == len(segments) - 1:
        stem, dot, _ext = segments[-1].rpartition(".")
        return stem if dot else segments[-1]
    return segments[after]
