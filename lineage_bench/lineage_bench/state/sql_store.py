"""SQLAlchemy-backed implementation of :class:`MetadataStore`.

Every call opens its own session via :func:`get_session`, so a batch insert
is one transaction and concurrent readers never share a session.  Backend
exceptions are translated into :class:`StoreError` subclasses with the
original exception chained as ``__cause__``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from lineage_bench.errors import DuplicateNameError, StoreError, UnknownTypeError
from lineage_bench.models.metadata import (
    NODE_RECORD_CLASSES,
    TYPE_RECORD_CLASSES,
    Artifact,
    Execution,
    NodeFamily,
    NodeRecord,
    TypeRecord,
)
from lineage_bench.state.database import get_session
from lineage_bench.state.store import check_family
from lineage_bench.state.tables import NodeTable, TypeTable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Row <-> record conversion
# ---------------------------------------------------------------------------


def _type_row(record: TypeRecord) -> TypeTable:
    return TypeTable(
        family=record.family.value,
        name=record.name,
        properties={key: value.value for key, value in record.properties.items()},
    )


def _type_from_row(row: TypeTable) -> TypeRecord:
    record_cls = TYPE_RECORD_CLASSES[NodeFamily(row.family)]
    return record_cls(id=row.id, name=row.name, properties=row.properties or {})


def _node_row(record: NodeRecord) -> NodeTable:
    uri: str | None = None
    state: str | None = None
    if isinstance(record, Artifact):
        uri = record.uri
        state = record.state.value
    elif isinstance(record, Execution):
        state = record.last_known_state.value
    return NodeTable(
        family=record.family.value,
        type_id=record.type_id,
        name=record.name,
        uri=uri,
        state=state,
        properties=dict(record.properties),
    )


def _node_from_row(row: NodeTable) -> NodeRecord:
    family = NodeFamily(row.family)
    fields: dict[str, Any] = {
        "id": row.id,
        "name": row.name,
        "type_id": row.type_id,
        "properties": row.properties or {},
    }
    if family is NodeFamily.ARTIFACT:
        fields["uri"] = row.uri
        if row.state is not None:
            fields["state"] = row.state
    elif family is NodeFamily.EXECUTION and row.state is not None:
        fields["last_known_state"] = row.state
    return NODE_RECORD_CLASSES[family](**fields)


# ---------------------------------------------------------------------------
# SqlMetadataStore
# ---------------------------------------------------------------------------


class SqlMetadataStore:
    """Metadata store persisted in the ``types`` and ``nodes`` tables."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def insert_types(self, family: NodeFamily, records: Sequence[TypeRecord]) -> list[int]:
        """Insert a batch of types in one transaction and return their ids."""
        check_family(family, records)
        if not records:
            return []

        rows = [_type_row(record) for record in records]
        try:
            async with get_session(self._engine) as session:
                session.add_all(rows)
                await session.flush()
                ids = [row.id for row in rows]
        except IntegrityError as exc:
            raise DuplicateNameError(f"{family.value} type name already exists in batch of {len(rows)}") from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to insert {len(rows)} {family.value} types: {exc}") from exc

        logger.debug("Stored %d %s types", len(ids), family.value)
        return ids

    async def insert_nodes(self, family: NodeFamily, records: Sequence[NodeRecord]) -> list[int]:
        """Insert a batch of nodes in one transaction and return their ids.

        Type references are checked against the family's existing types
        before anything is written.
        """
        check_family(family, records)
        if not records:
            return []

        rows = [_node_row(record) for record in records]
        try:
            async with get_session(self._engine) as session:
                referenced = {row.type_id for row in rows}
                if None in referenced:
                    raise UnknownTypeError(f"{family.value} node submitted without a type id")
                result = await session.execute(
                    select(TypeTable.id).where(
                        TypeTable.family == family.value,
                        TypeTable.id.in_(sorted(referenced)),
                    )
                )
                missing = referenced - set(result.scalars().all())
                if missing:
                    raise UnknownTypeError(f"No {family.value} type with id(s) {sorted(missing)}")

                session.add_all(rows)
                await session.flush()
                ids = [row.id for row in rows]
        except IntegrityError as exc:
            raise DuplicateNameError(f"{family.value} node name already exists in batch of {len(rows)}") from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to insert {len(rows)} {family.value} nodes: {exc}") from exc

        logger.debug("Stored %d %s nodes", len(ids), family.value)
        return ids

    async def list_types(self, family: NodeFamily) -> list[TypeRecord]:
        """Return every type of *family*, ordered by id."""
        try:
            async with get_session(self._engine) as session:
                result = await session.execute(
                    select(TypeTable).where(TypeTable.family == family.value).order_by(TypeTable.id)
                )
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to list {family.value} types: {exc}") from exc
        return [_type_from_row(row) for row in rows]

    async def list_nodes(self, family: NodeFamily) -> list[NodeRecord]:
        """Return every node of *family*, ordered by id."""
        try:
            async with get_session(self._engine) as session:
                result = await session.execute(
                    select(NodeTable).where(NodeTable.family == family.value).order_by(NodeTable.id)
                )
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to list {family.value} nodes: {exc}") from exc
        return [_node_from_row(row) for row in rows]
