"""Tree pass over tree-sitter Lua trees."""

from gluadoc.binding.binder import bind_tree, find_class_node
from gluadoc.binding.parser import get_parser, parse_source
from gluadoc.binding.sink import BoundDoc, DocumentationSink, RecordingSink

__all__ = [
    "BoundDoc",
    "DocumentationSink",
    "RecordingSink",
    "bind_tree",
    "find_class_node",
    "get_parser",
    "parse_source",
]
