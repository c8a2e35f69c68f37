"""Dict-backed :class:`MetadataStore` for tests and throwaway runs.

Applies the same constraints as :class:`SqlMetadataStore` (unique type names
per family, unique node names per type, node types must exist in the same
family) and validates a whole batch before writing any of it.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Sequence

from lineage_bench.errors import DuplicateNameError, UnknownTypeError
from lineage_bench.models.metadata import NodeFamily, NodeRecord, TypeRecord
from lineage_bench.state.store import check_family


class InMemoryMetadataStore:
    """Metadata store held entirely in process memory."""

    def __init__(self) -> None:
        self._types: dict[int, TypeRecord] = {}
        self._nodes: dict[int, NodeRecord] = {}
        self._type_ids = itertools.count(1)
        self._node_ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def insert_types(self, family: NodeFamily, records: Sequence[TypeRecord]) -> list[int]:
        check_family(family, records)
        async with self._lock:
            taken = {t.name for t in self._types.values() if t.family == family}
            for record in records:
                if record.name in taken:
                    raise DuplicateNameError(f"{family.value} type {record.name!r} already exists")
                taken.add(record.name)

            ids: list[int] = []
            for record in records:
                type_id = next(self._type_ids)
                self._types[type_id] = record.model_copy(update={"id": type_id})
                ids.append(type_id)
            return ids

    async def insert_nodes(self, family: NodeFamily, records: Sequence[NodeRecord]) -> list[int]:
        check_family(family, records)
        async with self._lock:
            for record in records:
                known = self._types.get(record.type_id) if record.type_id is not None else None
                if known is None or known.family != family:
                    raise UnknownTypeError(f"No {family.value} type with id {record.type_id}")

            taken = {(n.type_id, n.name) for n in self._nodes.values()}
            for record in records:
                key = (record.type_id, record.name)
                if key in taken:
                    raise DuplicateNameError(f"{family.value} node {record.name!r} already exists")
                taken.add(key)

            ids: list[int] = []
            for record in records:
                node_id = next(self._node_ids)
                self._nodes[node_id] = record.model_copy(update={"id": node_id})
                ids.append(node_id)
            return ids

    async def list_types(self, family: NodeFamily) -> list[TypeRecord]:
        async with self._lock:
            return [t for _, t in sorted(self._types.items()) if t.family == family]

    async def list_nodes(self, family: NodeFamily) -> list[NodeRecord]:
        async with self._lock:
            return [n for _, n in sorted(self._nodes.items()) if n.family == family]
