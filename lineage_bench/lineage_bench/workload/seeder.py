"""Seed a metadata store with uniquely named types and nodes.

Both entry points issue one batched insert per family and return only once
every insert has been acknowledged.  Store failures propagate unchanged;
nothing is retried, because a failed batch may or may not have committed.

Nodes attach to the family's existing types in round-robin order (by type
id).  If a family has no types, nodes are still submitted without a type id
so that the store reports the missing precondition as
:class:`~lineage_bench.errors.UnknownTypeError` rather than the seeder
silently inserting nothing.
"""

from __future__ import annotations

import logging

from lineage_bench.config import BenchSettings
from lineage_bench.errors import StoreError
from lineage_bench.models.metadata import (
    NODE_RECORD_CLASSES,
    TYPE_RECORD_CLASSES,
    NodeFamily,
    NodeRecord,
    PropertyType,
)
from lineage_bench.state.store import MetadataStore
from lineage_bench.workload.naming import NameGenerator

logger = logging.getLogger(__name__)

# Every seeded type declares this property and every seeded node sets it.
SEED_PROPERTY = "property"


def _family_counts(artifacts: int, executions: int, contexts: int) -> dict[NodeFamily, int]:
    counts = {
        NodeFamily.ARTIFACT: artifacts,
        NodeFamily.EXECUTION: executions,
        NodeFamily.CONTEXT: contexts,
    }
    for family, count in counts.items():
        if count < 0:
            raise ValueError(f"{family.value} count must be >= 0, got {count}")
    return counts


def _check_acknowledged(family: NodeFamily, kind: str, requested: int, ids: list[int]) -> None:
    if len(ids) != requested:
        raise StoreError(f"Store acknowledged {len(ids)} of {requested} {family.value} {kind}")


def _make_node(family: NodeFamily, name: str, type_id: int | None, index: int) -> NodeRecord:
    fields: dict[str, object] = {
        "name": name,
        "type_id": type_id,
        "properties": {SEED_PROPERTY: f"value-{index}"},
    }
    if family is NodeFamily.ARTIFACT:
        fields["uri"] = f"file:///lineage_bench/{name}"
    return NODE_RECORD_CLASSES[family](**fields)


async def insert_types_in_db(
    num_artifact_types: int,
    num_execution_types: int,
    num_context_types: int,
    store: MetadataStore,
    *,
    names: NameGenerator | None = None,
) -> None:
    """Insert the requested number of uniquely named types per family.

    Families with a zero count are skipped without a store call.

    Raises:
        ValueError: If a count is negative.
        StoreError: Whatever the store raises, unchanged.
    """
    names = names or NameGenerator()
    counts = _family_counts(num_artifact_types, num_execution_types, num_context_types)

    for family, count in counts.items():
        if count == 0:
            continue
        record_cls = TYPE_RECORD_CLASSES[family]
        records = [
            record_cls(name=name, properties={SEED_PROPERTY: PropertyType.STRING})
            for name in names.type_names(family, count)
        ]
        ids = await store.insert_types(family, records)
        _check_acknowledged(family, "types", count, ids)
        logger.info(
            "Inserted %d %s types",
            count,
            family.value,
            extra={"family": family.value, "count": count, "run_id": names.run_id},
        )


async def insert_nodes_in_db(
    num_artifact_nodes: int,
    num_execution_nodes: int,
    num_context_nodes: int,
    store: MetadataStore,
    *,
    names: NameGenerator | None = None,
) -> None:
    """Insert the requested number of uniquely named nodes per family.

    The family's types are read back from the store first to discover the
    ids new nodes can reference.

    Raises:
        ValueError: If a count is negative.
        UnknownTypeError: From the store, when a family with a positive count
            has no types.
        StoreError: Whatever else the store raises, unchanged.
    """
    names = names or NameGenerator()
    counts = _family_counts(num_artifact_nodes, num_execution_nodes, num_context_nodes)

    for family, count in counts.items():
        if count == 0:
            continue
        type_ids = [t.id for t in await store.list_types(family)]
        records = [
            _make_node(family, name, type_ids[index % len(type_ids)] if type_ids else None, index)
            for index, name in enumerate(names.node_names(family, count))
        ]
        ids = await store.insert_nodes(family, records)
        _check_acknowledged(family, "nodes", count, ids)
        logger.info(
            "Inserted %d %s nodes across %d types",
            count,
            family.value,
            len(type_ids),
            extra={"family": family.value, "count": count, "run_id": names.run_id},
        )


async def seed_from_settings(settings: BenchSettings, store: MetadataStore) -> None:
    """Insert the type and node counts configured in *settings*, types first."""
    names = NameGenerator.from_settings(settings)
    await insert_types_in_db(
        settings.num_artifact_types,
        settings.num_execution_types,
        settings.num_context_types,
        store,
        names=names,
    )
    await insert_nodes_in_db(
        settings.num_artifacts,
        settings.num_executions,
        settings.num_contexts,
        store,
        names=names,
    )
