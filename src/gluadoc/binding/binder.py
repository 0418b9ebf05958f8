"""Tree pass: attach class and networked-field docs to a parsed file.

Runs after the text pass on the host's parsed tree. For a scripted
class file the top-level ``local ENT`` declaration becomes the class
node; every ``self:NetworkVar(...)`` inside ``ENT:SetupDataTables``
adds a setter and getter field to it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import tree_sitter

from gluadoc.binding.parser import node_text
from gluadoc.binding.sink import DocumentationSink
from gluadoc.config import PluginConfig
from gluadoc.constants import (
    DATATABLE_SETUP_METHOD,
    MAX_ANCESTOR_DEPTH,
    NETWORK_VAR_METHODS,
)
from gluadoc.scope.classifier import classify
from gluadoc.synthesis import network_var
from gluadoc.synthesis.schemas import NetworkField

logger = logging.getLogger(__name__)

_FIELD_PREFIX = "---@field "


def bind_tree(
    file_path: str,
    tree: tree_sitter.Tree,
    sink: DocumentationSink,
    config: PluginConfig,
) -> int:
    """Bind docs for one file; returns how many the sink accepted."""
    classification = classify(file_path, config.scopes)
    if classification is None:
        return 0
    scope_global = classification.scope_name
    logical_type = classification.logical_type_name

    class_node = find_class_node(tree.root_node, scope_global)
    if class_node is None:
        logger.debug("event=no_class_node global=%s", scope_global)
        return 0

    if not sink.add_class_doc(class_node, f"{logical_type}: {scope_global}"):
        return 0
    bound = 1

    for call in _iter_nodes(tree.root_node, "function_call"):
        field = _network_field(call, scope_global)
        if field is None:
            continue
        for line in network_var.field_lines(field, logical_type, config):
            if not sink.add_field_doc(class_node, line.removeprefix(_FIELD_PREFIX)):
                break
            bound += 1
    return bound


def find_class_node(
    root: tree_sitter.Node, global_name: str
) -> tree_sitter.Node | None:
    """The top-level ``local <global>`` declaration, if any."""
    for child in root.named_children:
        if child.type != "variable_declaration":
            continue
        if global_name in _declared_names(child):
            return child
    return None


def _declared_names(node: tree_sitter.Node) -> list[str]:
    for child in node.named_children:
        if child.type == "variable_list":
            return [
                node_text(c) for c in child.named_children if c.type == "identifier"
            ]
        if child.type == "assignment_statement":
            return _declared_names(child)
    return []


def _iter_nodes(root: tree_sitter.Node, node_type: str) -> Iterator[tree_sitter.Node]:
    """Pre-order walk yielding nodes of one type, in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == node_type:
            yield node
        stack.extend(reversed(node.children))


def _method_parts(node: tree_sitter.Node | None) -> tuple[str, str] | None:
    """``(receiver, method)`` for ``a:b`` expressions."""
    if node is None or node.type != "method_index_expression":
        return None
    table = node.child_by_field_name("table")
    method = node.child_by_field_name("method")
    if table is None or method is None:
        return None
    return node_text(table), node_text(method)


def _network_field(
    call: tree_sitter.Node, scope_global: str
) -> NetworkField | None:
    parts = _method_parts(call.child_by_field_name("name"))
    if parts is None:
        return None
    receiver, method = parts
    if method not in NETWORK_VAR_METHODS:
        return None
    if receiver not in {"self", scope_global}:
        return None
    if not _inside_setup_method(call, scope_global):
        return None

    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    args = [
        node_text(a) for a in arguments.named_children if a.type != "comment"
    ]
    position = call.start_byte + 1
    if method == "NetworkVarElement":
        return network_var.parse_network_var_element(args, position)
    return network_var.parse_network_var(args, position)


def _inside_setup_method(node: tree_sitter.Node, scope_global: str) -> bool:
    parent = node.parent
    for _ in range(MAX_ANCESTOR_DEPTH):
        if parent is None:
            return False
        if parent.type == "function_declaration":
            parts = _method_parts(parent.child_by_field_name("name"))
            return parts == (scope_global, DATATABLE_SETUP_METHOD)
        parent = parent.parent
    return False
