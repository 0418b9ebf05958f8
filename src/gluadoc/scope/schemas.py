"""Pydantic models for scope classification and folder detection."""

from pydantic import BaseModel, ConfigDict

from gluadoc.constants import BaseKind


class ClassificationResult(BaseModel):
    """Scope global and inferred type name for one file."""

    model_config = ConfigDict(frozen=True)

    scope_name: str  # ENT, SWEP, EFFECT, TOOL
    logical_type_name: str  # my_ent


class FolderBaseInfo(BaseModel):
    """Base type declared by a folder's hub files."""

    model_config = ConfigDict(frozen=True)

    kind: BaseKind
    value: str


class FolderInfo(BaseModel):
    """A directory that defines a whole type, plus its base."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: BaseKind
    value: str
