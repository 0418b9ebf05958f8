"""Per-file text pass: every synthesizer, then diff assembly.

Pure function of (text, classification, folder, config). Folder
detection and offset conversion belong to the caller.
"""

from __future__ import annotations

import logging

from gluadoc.config import PluginConfig
from gluadoc.constants import META_FILE_MARKER
from gluadoc.scanning.text import find_class_docs
from gluadoc.scope.schemas import ClassificationResult, FolderInfo
from gluadoc.synthesis import (
    accessor,
    baseclass,
    network_var,
    registration,
    scripted_class,
)
from gluadoc.synthesis.diff import assemble
from gluadoc.synthesis.doc_lines import missing_lines, to_diff_text
from gluadoc.synthesis.schemas import TextEdit

logger = logging.getLogger(__name__)


def annotate_text(
    text: str,
    config: PluginConfig,
    classification: ClassificationResult | None = None,
    folder: FolderInfo | None = None,
    *,
    skip_meta_files: bool = True,
) -> list[TextEdit] | None:
    """Edits for one file in application order, or None if nothing to do."""
    if skip_meta_files and text.startswith(META_FILE_MARKER):
        return None

    edits: list[TextEdit] = []
    if classification is not None:
        edits += scripted_class.synthesize(text, classification, folder, config)

    edits += baseclass.synthesize(text, config)
    edits += registration.synthesize(text, config)

    if classification is None:
        edits += _unscoped_field_edits(text, config)

    logger.debug("event=annotate edits=%d", len(edits))
    return assemble(edits)


def _unscoped_field_edits(text: str, config: PluginConfig) -> list[TextEdit]:
    """Fields under existing class lines, else inline networked fields."""
    class_docs = find_class_docs(text, config.patterns)
    if not class_docs:
        return network_var.synthesize(text, None, None, config)

    edits: list[TextEdit] = []
    for idx, doc in enumerate(class_docs):
        if doc.table_var is None:
            continue
        # 1-based range: just after this class line up to the next one's end
        range_start = doc.line_end + 2
        range_end = (
            class_docs[idx + 1].line_end + 1
            if idx + 1 < len(class_docs)
            else len(text)
        )
        lines = accessor.collect_lines_for_target(
            text,
            doc.table_var,
            config,
            logical_type=doc.class_name,
            range_start=range_start,
            range_end=range_end,
        )
        lines += network_var.collect_field_doc_lines(
            text,
            None,
            doc.class_name,
            config,
            range_start=range_start,
            range_end=range_end,
        )
        lines = missing_lines(text, lines)
        if lines:
            edits.append(
                TextEdit.insertion(doc.line_end + 1, to_diff_text(lines))
            )
    return edits
