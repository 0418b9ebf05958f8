"""Where bound documentation goes.

The language server owns the real tree and its documentation API; the
binder only talks to a :class:`DocumentationSink`. ``RecordingSink``
keeps everything in memory for tests and the CLI.
"""

from __future__ import annotations

from typing import Protocol

import tree_sitter
from pydantic import BaseModel

from gluadoc.constants import DocKind


class DocumentationSink(Protocol):
    def add_class_doc(self, node: tree_sitter.Node, text: str) -> bool: ...
    def add_field_doc(self, node: tree_sitter.Node, text: str) -> bool: ...


class BoundDoc(BaseModel):
    kind: DocKind
    text: str
    node_type: str
    line: int  # 1-based line of the node the doc is attached to


class RecordingSink:
    """Accepts (or refuses) every doc and records what it accepted."""

    def __init__(self, *, accept_class: bool = True) -> None:
        self.accept_class = accept_class
        self.docs: list[BoundDoc] = []

    def add_class_doc(self, node: tree_sitter.Node, text: str) -> bool:
        if not self.accept_class:
            return False
        self._record(DocKind.CLASS, node, text)
        return True

    def add_field_doc(self, node: tree_sitter.Node, text: str) -> bool:
        self._record(DocKind.FIELD, node, text)
        return True

    def texts(self, kind: DocKind | None = None) -> list[str]:
        return [d.text for d in self.docs if kind is None or d.kind is kind]

    def _record(self, kind: DocKind, node: tree_sitter.Node, text: str) -> None:
        self.docs.append(
            BoundDoc(
                kind=kind,
                text=text,
                node_type=node.type,
                line=node.start_point[0] + 1,
            )
        )
