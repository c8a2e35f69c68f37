"""Typed records for the artifact/execution/context lineage graph.

Each of the three node families has a *type* record (the schema) and a
*node* record (an instance referencing one type of the same family).  The
store hands back family-specific records; workload stages that do not care
about the family consume them through the :data:`Type` and :data:`Node`
discriminated unions.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeFamily(str, Enum):
    """The three parallel entity families of the lineage graph."""

    ARTIFACT = "ARTIFACT"
    EXECUTION = "EXECUTION"
    CONTEXT = "CONTEXT"


class PropertyType(str, Enum):
    """Declared value type of a property on a type record."""

    INT = "INT"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    STRUCT = "STRUCT"
    PROTO = "PROTO"
    BOOLEAN = "BOOLEAN"


class ArtifactState(str, Enum):
    UNKNOWN = "UNKNOWN"
    PENDING = "PENDING"
    LIVE = "LIVE"
    MARKED_FOR_DELETION = "MARKED_FOR_DELETION"
    DELETED = "DELETED"


class ExecutionState(str, Enum):
    UNKNOWN = "UNKNOWN"
    NEW = "NEW"
    RUNNING = "RUNNING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"
    CACHED = "CACHED"
    CANCELED = "CANCELED"


PropertyValue = Union[bool, int, float, str]


# ---------------------------------------------------------------------------
# Type records
# ---------------------------------------------------------------------------


class TypeRecord(BaseModel):
    """Fields shared by every type record."""

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(
        default=None,
        description="Identifier assigned by the store; None until inserted.",
    )
    name: str = Field(..., min_length=1)
    family: NodeFamily
    properties: dict[str, PropertyType] = Field(default_factory=dict)


class ArtifactType(TypeRecord):
    family: Literal[NodeFamily.ARTIFACT] = NodeFamily.ARTIFACT


class ExecutionType(TypeRecord):
    family: Literal[NodeFamily.EXECUTION] = NodeFamily.EXECUTION


class ContextType(TypeRecord):
    family: Literal[NodeFamily.CONTEXT] = NodeFamily.CONTEXT


# ---------------------------------------------------------------------------
# Node records
# ---------------------------------------------------------------------------


class NodeRecord(BaseModel):
    """Fields shared by every node record."""

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(
        default=None,
        description="Identifier assigned by the store; None until inserted.",
    )
    name: str = Field(..., min_length=1)
    family: NodeFamily
    type_id: int | None = Field(
        default=None,
        description="Id of the type this node instantiates (same family).",
    )
    properties: dict[str, PropertyValue] = Field(default_factory=dict)


class Artifact(NodeRecord):
    family: Literal[NodeFamily.ARTIFACT] = NodeFamily.ARTIFACT
    uri: str | None = None
    state: ArtifactState = ArtifactState.UNKNOWN


class Execution(NodeRecord):
    family: Literal[NodeFamily.EXECUTION] = NodeFamily.EXECUTION
    last_known_state: ExecutionState = ExecutionState.UNKNOWN


class Context(NodeRecord):
    family: Literal[NodeFamily.CONTEXT] = NodeFamily.CONTEXT


# Family-erased views consumed generically by workload stages.
Type = Annotated[Union[ArtifactType, ExecutionType, ContextType], Field(discriminator="family")]
Node = Annotated[Union[Artifact, Execution, Context], Field(discriminator="family")]

TYPE_RECORD_CLASSES: dict[NodeFamily, type[TypeRecord]] = {
    NodeFamily.ARTIFACT: ArtifactType,
    NodeFamily.EXECUTION: ExecutionType,
    NodeFamily.CONTEXT: ContextType,
}

NODE_RECORD_CLASSES: dict[NodeFamily, type[NodeRecord]] = {
    NodeFamily.ARTIFACT: Artifact,
    NodeFamily.EXECUTION: Execution,
    NodeFamily.CONTEXT: Context,
}
