"""Shared constants. Single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so they can be compared against
raw config values and serialized to JSON unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class BaseKind(StrEnum):
    """How a folder-declared base type was written."""

    IDENTIFIER = "identifier"  # ENT.Base = base_entity
    LITERAL = "literal"  # ENT.Base = "base_anim"


class EditKind(StrEnum):
    """Shape of a text edit, derived from its offsets."""

    INSERT = "insert"
    REPLACE = "replace"


class CallShape(StrEnum):
    """Recognised argument layouts, distinguished by arity and kind."""

    # vgui.Register(name, table[, base])
    REGISTER = "register"
    # derma.DefineControl(name, description, table[, base])
    DEFINE_CONTROL = "define_control"
    # NetworkVar(type, name)
    NAMED = "named"
    # NetworkVar(type, slot, name)
    INDEXED = "indexed"
    # NetworkVarElement(type, slot, element, name)
    ELEMENT = "element"


class DocKind(StrEnum):
    """Kinds of documentation attached to tree nodes."""

    CLASS = "class"
    FIELD = "field"


# ── Annotation Types ─────────────────────────────────────

# Universal marker for values whose type cannot be resolved
UNTYPED = "any"

# Owner type when neither a logical type nor a scope global is known
DEFAULT_ACCESSOR_OWNER = "table"
DEFAULT_NETWORK_OWNER = "Entity"

# Base type for panels registered without an explicit base
DEFAULT_PANEL_BASE = "Panel"

# Element slots of Vector/Angle networked fields are always numeric
NETWORK_ELEMENT_TYPE = "number"

# Accessor target fallbacks tried when the registered table has no calls
ACCESSOR_TARGET_FALLBACKS = ("PANEL", "self")

META_FILE_MARKER = "---@meta"

# ── Tree Binding ─────────────────────────────────────────

NETWORK_VAR_METHODS = frozenset({"NetworkVar", "NetworkVarElement"})
DATATABLE_SETUP_METHOD = "SetupDataTables"
# Parent hops searched when looking for the enclosing setup method
MAX_ANCESTOR_DEPTH = 12

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
DEFAULT_FOLDER_CACHE_SIZE = 1024
