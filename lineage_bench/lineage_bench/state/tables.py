"""SQLAlchemy 2.0 ORM table definitions for the lineage metadata store.

All three node families share one ``types`` table and one ``nodes`` table,
discriminated by the ``family`` column.  The ``Base`` declarative base is
exported for table creation and the store layer.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Declarative base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    """Shared declarative base for all lineage-bench tables."""


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class TypeTable(Base):
    """Named schemas for artifact, execution and context nodes."""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    family: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    properties: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("family", "name", name="uq_types_family_name"),
        Index("ix_types_family", "family"),
    )


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class NodeTable(Base):
    """Artifact, execution and context instances.

    ``state`` holds the artifact state for artifacts and the last known
    execution state for executions; it is NULL for contexts.
    """

    __tablename__ = "nodes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    family: Mapped[str] = mapped_column(String(16), nullable=False)
    type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("types.id", ondelete="RESTRICT"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    uri: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    properties: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("type_id", "name", name="uq_nodes_type_name"),
        Index("ix_nodes_family", "family"),
        Index("ix_nodes_type_id", "type_id"),
    )
