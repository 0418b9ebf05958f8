"""Cached tree-sitter parsers for the binder and the CLI."""

from __future__ import annotations

import importlib

import tree_sitter

from gluadoc.config import GRAMMAR_MODULES

_parser_cache: dict[str, tree_sitter.Parser] = {}


def get_parser(language: str = "lua") -> tree_sitter.Parser | None:
    """Get or create a cached parser; None if the grammar isn't installed."""
    if language in _parser_cache:
        return _parser_cache[language]

    module_name = GRAMMAR_MODULES.get(language)
    if module_name is None:
        return None

    try:
        mod = importlib.import_module(module_name)
        capsule: object = mod.language()
        lang = tree_sitter.Language(capsule)
        parser = tree_sitter.Parser(lang)
        _parser_cache[language] = parser
        return parser
    except (ImportError, AttributeError):
        return None


def parse_source(source: str, language: str = "lua") -> tree_sitter.Tree | None:
    parser = get_parser(language)
    if parser is None:
        return None
    return parser.parse(source.encode("utf-8"))


def node_text(node: tree_sitter.Node) -> str:
    return node.text.decode("utf-8") if node.text else ""
