"""Rewrite the ``DEFINE_BASECLASS`` macro into a plain local."""

from __future__ import annotations

from gluadoc.config import PluginConfig
from gluadoc.scanning.call_scanner import find_calls
from gluadoc.synthesis.schemas import TextEdit


def synthesize(text: str, config: PluginConfig) -> list[TextEdit]:
    """``DEFINE_BASECLASS("x")`` → ``local BaseClass = baseclass.Get("x")``."""
    return [
        TextEdit(
            start=site.start,
            finish=site.close,
            text=f"local BaseClass = baseclass.Get({site.args_text})\n",
        )
        for site in find_calls(text, config.patterns.define_baseclass)
    ]
