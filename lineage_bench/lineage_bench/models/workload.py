"""Workload specification configs consumed by the sampler.

These are produced by the benchmark's configuration layer.  Each config
carries one ``specification`` enum naming which entity kind a workload stage
operates on.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TypeSpecification(str, Enum):
    """Type family a FillTypes workload targets."""

    ARTIFACT_TYPE = "ARTIFACT_TYPE"
    EXECUTION_TYPE = "EXECUTION_TYPE"
    CONTEXT_TYPE = "CONTEXT_TYPE"


class NodeSpecification(str, Enum):
    """Node family a FillNodes workload targets."""

    ARTIFACT = "ARTIFACT"
    EXECUTION = "EXECUTION"
    CONTEXT = "CONTEXT"


class ContextEdgeSpecification(str, Enum):
    """Edge kind linking a non-context node to a context."""

    ATTRIBUTION = "ATTRIBUTION"  # Artifact <-> Context
    ASSOCIATION = "ASSOCIATION"  # Execution <-> Context


class EventSpecification(str, Enum):
    """Direction of an event between an execution and an artifact."""

    INPUT = "INPUT"
    OUTPUT = "OUTPUT"


class FillTypesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    specification: TypeSpecification


class FillNodesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    specification: NodeSpecification


class FillContextEdgesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    specification: ContextEdgeSpecification


class FillEventsConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    specification: EventSpecification
