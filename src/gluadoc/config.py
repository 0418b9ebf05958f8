"""Environment-based settings and the plugin configuration tables."""

from __future__ import annotations

import logging
import re
from functools import cached_property
from pathlib import Path
from typing import Any

import pathspec
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from gluadoc.constants import DEFAULT_FOLDER_CACHE_SIZE
from gluadoc.resilience.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and GLUADOC_* environment variables."""

    # Plugin configuration file (None = built-in defaults)
    config_path: Path | None = None

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None

    # Scanning
    folder_cache_size: int = DEFAULT_FOLDER_CACHE_SIZE  # 0 = unbounded
    byte_offsets: bool = True
    skip_meta_files: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "GLUADOC_",
        "extra": "ignore",
    }


# ---------------------------------------------------------------------------
# Plugin configuration models
# ---------------------------------------------------------------------------


class ScopeRule(BaseModel):
    """A scripted-class scope bound to a folder convention."""

    model_config = ConfigDict(populate_by_name=True)

    global_name: str = Field(alias="global")
    folder: str
    hub_filenames: list[str] = Field(default_factory=lambda: list[str]())
    satellite_patterns: list[str] = Field(
        default_factory=lambda: list[str]()
    )

    @field_validator("hub_filenames")
    @classmethod
    def _lower_hubs(cls, v: list[str]) -> list[str]:
        return [name.lower() for name in v]

    @property
    def folder_segments(self) -> tuple[str, ...]:
        """Lower-cased folder path split on either separator."""
        folder = self.folder.replace("\\", "/").lower()
        return tuple(seg for seg in folder.split("/") if seg)

    @cached_property
    def satellite_spec(self) -> pathspec.PathSpec:
        return pathspec.PathSpec.from_lines(
            "gitwildmatch", self.satellite_patterns
        )


class PatternSet(BaseModel):
    """Regular expressions for every recognised source shape.

    Call patterns must end at the opening parenthesis (``\\(``).
    ``*_by_name`` templates contain a ``{name}`` placeholder that is
    replaced with the escaped identifier before compiling.
    """

    # Registration calls
    vgui_register: str = r"vgui\s*\.\s*Register\s*\("
    derma_define_control: str = r"derma\s*\.\s*DefineControl\s*\("

    # Accessor and networked-field calls
    accessor_func: str = r"AccessorFunc\s*\("
    network_var: str = r"NetworkVar\s*\("
    network_var_element: str = r"NetworkVarElement\s*\("

    # Base-class macro
    define_baseclass: str = r"DEFINE_BASECLASS\s*\("

    # Assignment and declaration statements
    local_assignment: str = r"\blocal\s+([A-Za-z_]\w*)\s*=(?!=)"
    variable_assignment: str = r"([A-Za-z_]\w*)\s*=(?!=)\s*"
    local_assignment_by_name: str = r"\blocal\s+{name}\s*=(?!=)"
    base_assignment_by_name: str = r"\b{name}\.\s*Base\s*=\s*([A-Za-z_][\w.]*)"
    base_string_assignment_by_name: str = (
        r"""\b{name}\.\s*Base\s*=\s*["']([^"']+)["']"""
    )

    # Existing annotations
    class_doc: str = r"---@class\s+([\w.]+)[\s:]"

    @field_validator("*")
    @classmethod
    def _must_compile(cls, v: str) -> str:
        try:
            re.compile(v.replace("{name}", "X"))
        except re.error as exc:
            msg = f"invalid pattern {v!r}: {exc}"
            raise ValueError(msg) from exc
        return v

    def by_name(self, template: str, name: str) -> re.Pattern[str]:
        """Compile a ``{name}`` template for a specific identifier."""
        return re.compile(template.replace("{name}", re.escape(name)))


# Language → tree-sitter grammar wheel (import name)
GRAMMAR_MODULES: dict[str, str] = {
    "lua": "tree_sitter_lua",
}

_DEFAULT_HUBS = ["shared.lua", "init.lua", "cl_init.lua"]
_DEFAULT_SATELLITES = ["sv_*.lua", "cl_*.lua", "sh_*.lua"]

DEFAULT_SCOPES: list[dict[str, Any]] = [
    {
        "global": "ENT",
        "folder": "entities",
        "hub_filenames": _DEFAULT_HUBS,
        "satellite_patterns": _DEFAULT_SATELLITES,
    },
    {
        "global": "SWEP",
        "folder": "weapons",
        "hub_filenames": _DEFAULT_HUBS,
        "satellite_patterns": _DEFAULT_SATELLITES,
    },
    {
        "global": "EFFECT",
        "folder": "effects",
        "hub_filenames": ["init.lua", "cl_init.lua"],
        "satellite_patterns": ["cl_*.lua"],
    },
    {
        "global": "TOOL",
        "folder": "weapons/gmod_tool/stools",
        "hub_filenames": _DEFAULT_HUBS,
        "satellite_patterns": _DEFAULT_SATELLITES,
    },
]

# Datatable type tag → annotation type (NetworkVar / NetworkVarElement)
DEFAULT_DT_TYPES: dict[str, str] = {
    "String": "string",
    "Bool": "boolean",
    "Float": "number",
    "Int": "integer",
    "Vector": "Vector",
    "Angle": "Angle",
    "Entity": "Entity",
}

# AccessorFunc FORCE_* constant → annotation type
DEFAULT_FORCE_TYPES: dict[str, str] = {
    "FORCE_STRING": "string",
    "FORCE_NUMBER": "number",
    "FORCE_BOOL": "boolean",
    "FORCE_ANGLE": "Angle",
    "FORCE_COLOR": "Color",
    "FORCE_VECTOR": "Vector",
}

# Numeric FORCE_* values, for calls that pass the raw number
DEFAULT_FORCE_TYPES_BY_NUMBER: dict[int, str] = {
    0: "any",  # FORCE_NONE
    1: "string",
    2: "number",
    3: "boolean",
    4: "Angle",
    5: "Color",
    6: "Vector",
}


class PluginConfig(BaseModel):
    """Everything the scanners need; read-only once loaded."""

    scopes: list[ScopeRule] = Field(
        default_factory=lambda: [
            ScopeRule.model_validate(s) for s in DEFAULT_SCOPES
        ]
    )
    dt_types: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DT_TYPES)
    )
    accessor_force_types: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_FORCE_TYPES)
    )
    accessor_force_types_by_number: dict[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_FORCE_TYPES_BY_NUMBER)
    )
    engine_base_aliases: list[str] = Field(
        default_factory=lambda: list[str]()
    )
    param_name_types: dict[str, str] = Field(
        default_factory=lambda: dict[str, str]()
    )
    patterns: PatternSet = Field(default_factory=PatternSet)

    @field_validator("engine_base_aliases")
    @classmethod
    def _lower_aliases(cls, v: list[str]) -> list[str]:
        return [alias.lower() for alias in v]

    @field_validator("param_name_types")
    @classmethod
    def _lower_param_names(cls, v: dict[str, str]) -> dict[str, str]:
        return {k.lower(): t for k, t in v.items()}

    def scope_for(self, global_name: str) -> ScopeRule | None:
        """Return the first scope rule declared for a global."""
        for rule in self.scopes:
            if rule.global_name == global_name:
                return rule
        return None


def load_plugin_config(path: Path | None = None) -> PluginConfig:
    """Load plugin configuration from a YAML file.

    ``None`` returns the built-in defaults. Keys omitted from the file
    keep their defaults. Raises :class:`ConfigurationError` if the file
    is missing, is not a YAML mapping, or fails validation.
    """
    if path is None:
        return PluginConfig()

    if not path.exists():
        msg = f"Plugin config not found: {path}"
        raise ConfigurationError(msg)

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Unable to read plugin config {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"Plugin config {path} must be a mapping, got {type(raw).__name__}"
        raise ConfigurationError(msg)

    try:
        config = PluginConfig.model_validate(raw)
    except ValidationError as exc:
        msg = f"Invalid plugin config {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if not config.scopes:
        logger.warning("Plugin config %s declares no scopes", path)
    return config
