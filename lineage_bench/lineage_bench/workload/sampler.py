"""Read back existing types and nodes as operands for workload stages.

Every call re-reads the store; nothing is cached between calls, since
workload stages insert more entities between samples.  The config's class
selects the overload and its ``specification`` selects the family through
one explicit mapping per specification enum.  Each mapping covers every
member of its enum; anything else raises
:class:`~lineage_bench.errors.InvalidSpecificationError` before the store
is called.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TypeVar, overload

from pydantic import BaseModel

from lineage_bench.errors import InvalidSpecificationError
from lineage_bench.models.metadata import Node, NodeFamily, Type
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
from lineage_bench.state.store import MetadataStore

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)
_T = TypeVar("_T")

TYPE_SPECIFICATION_FAMILIES: dict[TypeSpecification, NodeFamily] = {
    TypeSpecification.ARTIFACT_TYPE: NodeFamily.ARTIFACT,
    TypeSpecification.EXECUTION_TYPE: NodeFamily.EXECUTION,
    TypeSpecification.CONTEXT_TYPE: NodeFamily.CONTEXT,
}

NODE_SPECIFICATION_FAMILIES: dict[NodeSpecification, NodeFamily] = {
    NodeSpecification.ARTIFACT: NodeFamily.ARTIFACT,
    NodeSpecification.EXECUTION: NodeFamily.EXECUTION,
    NodeSpecification.CONTEXT: NodeFamily.CONTEXT,
}

# (non-context family, context family)
CONTEXT_EDGE_FAMILIES: dict[ContextEdgeSpecification, tuple[NodeFamily, NodeFamily]] = {
    ContextEdgeSpecification.ATTRIBUTION: (NodeFamily.ARTIFACT, NodeFamily.CONTEXT),
    ContextEdgeSpecification.ASSOCIATION: (NodeFamily.EXECUTION, NodeFamily.CONTEXT),
}

# (artifact family, execution family); both directions pair the same families.
EVENT_FAMILIES: dict[EventSpecification, tuple[NodeFamily, NodeFamily]] = {
    EventSpecification.INPUT: (NodeFamily.ARTIFACT, NodeFamily.EXECUTION),
    EventSpecification.OUTPUT: (NodeFamily.ARTIFACT, NodeFamily.EXECUTION),
}


def _resolve(mapping: Mapping[_E, _T], specification_cls: type[_E], config: BaseModel) -> _T:
    specification = getattr(config, "specification", None)
    # Members of another str-Enum compare equal to ours by value.
    if isinstance(specification, specification_cls) and specification in mapping:
        return mapping[specification]
    raise InvalidSpecificationError(f"{type(config).__name__} does not support specification {specification!r}")


def _unsupported(config: object) -> InvalidSpecificationError:
    return InvalidSpecificationError(f"Unsupported workload config {type(config).__name__}")


async def get_existing_types(
    config: FillTypesConfig | FillNodesConfig,
    store: MetadataStore,
) -> list[Type]:
    """Return every existing type of the family named by *config*.

    ``FillTypesConfig`` names a type family directly; ``FillNodesConfig``
    names a node family and yields the types those nodes would use.  An
    empty family yields an empty list.
    """
    if isinstance(config, FillTypesConfig):
        family = _resolve(TYPE_SPECIFICATION_FAMILIES, TypeSpecification, config)
    elif isinstance(config, FillNodesConfig):
        family = _resolve(NODE_SPECIFICATION_FAMILIES, NodeSpecification, config)
    else:
        raise _unsupported(config)

    existing: list[Type] = list(await store.list_types(family))  # type: ignore[arg-type]
    logger.debug(
        "Sampled %d existing %s types",
        len(existing),
        family.value,
        extra={
            "family": family.value,
            "count": len(existing),
            "specification": config.specification.value,
        },
    )
    return existing


async def _list_nodes(store: MetadataStore, family: NodeFamily, specification: Enum) -> list[Node]:
    existing: list[Node] = list(await store.list_nodes(family))  # type: ignore[arg-type]
    logger.debug(
        "Sampled %d existing %s nodes",
        len(existing),
        family.value,
        extra={"family": family.value, "count": len(existing), "specification": specification.value},
    )
    return existing


@overload
async def get_existing_nodes(config: FillNodesConfig, store: MetadataStore) -> list[Node]: ...


@overload
async def get_existing_nodes(
    config: FillContextEdgesConfig | FillEventsConfig,
    store: MetadataStore,
) -> tuple[list[Node], list[Node]]: ...


async def get_existing_nodes(
    config: FillNodesConfig | FillContextEdgesConfig | FillEventsConfig,
    store: MetadataStore,
) -> list[Node] | tuple[list[Node], list[Node]]:
    """Return the existing nodes a workload stage can operate on.

    * ``FillNodesConfig`` -- every node of the named family.
    * ``FillContextEdgesConfig`` -- ``(non_context_nodes, context_nodes)``:
      artifacts for ATTRIBUTION or executions for ASSOCIATION, plus every
      context.
    * ``FillEventsConfig`` -- ``(artifact_nodes, execution_nodes)``.

    Paired results come from two independent full reads, one per family;
    existing edges between them play no part.
    """
    if isinstance(config, FillNodesConfig):
        return await _list_nodes(
            store, _resolve(NODE_SPECIFICATION_FAMILIES, NodeSpecification, config), config.specification
        )

    if isinstance(config, FillContextEdgesConfig):
        first, second = _resolve(CONTEXT_EDGE_FAMILIES, ContextEdgeSpecification, config)
    elif isinstance(config, FillEventsConfig):
        first, second = _resolve(EVENT_FAMILIES, EventSpecification, config)
    else:
        raise _unsupported(config)

    return (
        await _list_nodes(store, first, config.specification),
        await _list_nodes(store, second, config.specification),
    )
