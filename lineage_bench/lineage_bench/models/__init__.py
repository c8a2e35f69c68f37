"""Pydantic models for lineage records and workload specifications."""

from lineage_bench.models.metadata import (
    NODE_RECORD_CLASSES,
    TYPE_RECORD_CLASSES,
    Artifact,
    ArtifactState,
    ArtifactType,
    Context,
    ContextType,
    Execution,
    ExecutionState,
    ExecutionType,
    Node,
    NodeFamily,
    NodeRecord,
    PropertyType,
    Type,
    TypeRecord,
)
from lineage_bench.models.workload import (
    ContextEdgeSpecification,
    EventSpecification,
    FillContextEdgesConfig,
    FillEventsConfig,
    FillNodesConfig,
    FillTypesConfig,
    NodeSpecification,
    TypeSpecification,
)

__all__ = [
    "NODE_RECORD_CLASSES",
    "TYPE_RECORD_CLASSES",
    "Artifact",
    "ArtifactState",
    "ArtifactType",
    "Context",
    "ContextEdgeSpecification",
    "ContextType",
    "EventSpecification",
    "Execution",
    "ExecutionState",
    "ExecutionType",
    "FillContextEdgesConfig",
    "FillEventsConfig",
    "FillNodesConfig",
    "FillTypesConfig",
    "Node",
    "NodeFamily",
    "NodeRecord",
    "NodeSpecification",
    "PropertyType",
    "Type",
    "TypeRecord",
    "TypeSpecification",
]
