"""Shared store fixtures for lineage-bench tests.

``store`` is parametrised over both implementations so every seeder and
sampler test runs against the dict-backed store and an in-memory SQLite
``SqlMetadataStore``.  ``recording_store`` wraps it and records each call,
which lets tests assert that invalid input never reaches the store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

import pytest
import pytest_asyncio
from lineage_bench.models.metadata import NodeFamily, NodeRecord, TypeRecord
from lineage_bench.state.database import create_tables
from lineage_bench.state.memory_store import InMemoryMetadataStore
from lineage_bench.state.sql_store import SqlMetadataStore
from lineage_bench.state.sqlite_adapter import get_local_engine
from lineage_bench.state.store import MetadataStore
from lineage_bench.workload.naming import NameGenerator
from sqlalchemy.ext.asyncio import AsyncEngine


class RecordingStore:
    """Delegating store that records ``(operation, family)`` for each call."""

    def __init__(self, inner: MetadataStore) -> None:
        self.inner = inner
        self.calls: list[tuple[str, NodeFamily]] = []

    async def insert_types(self, family: NodeFamily, records: Sequence[TypeRecord]) -> list[int]:
        self.calls.append(("insert_types", family))
        return await self.inner.insert_types(family, records)

    async def insert_nodes(self, family: NodeFamily, records: Sequence[NodeRecord]) -> list[int]:
        self.calls.append(("insert_nodes", family))
        return await self.inner.insert_nodes(family, records)

    async def list_types(self, family: NodeFamily) -> list[TypeRecord]:
        self.calls.append(("list_types", family))
        return await self.inner.list_types(family)

    async def list_nodes(self, family: NodeFamily) -> list[NodeRecord]:
        self.calls.append(("list_nodes", family))
        return await self.inner.list_nodes(family)


@pytest_asyncio.fixture
async def sql_engine() -> AsyncIterator[AsyncEngine]:
    """Provide an in-memory SQLite engine with the metadata tables created."""
    engine = get_local_engine(":memory:")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_store(sql_engine: AsyncEngine) -> SqlMetadataStore:
    return SqlMetadataStore(sql_engine)


@pytest.fixture
def memory_store() -> InMemoryMetadataStore:
    return InMemoryMetadataStore()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request: pytest.FixtureRequest) -> AsyncIterator[MetadataStore]:
    """Yield each store implementation in turn."""
    if request.param == "memory":
        yield InMemoryMetadataStore()
        return

    engine = get_local_engine(":memory:")
    await create_tables(engine)
    yield SqlMetadataStore(engine)
    await engine.dispose()


@pytest.fixture
def recording_store(store: MetadataStore) -> RecordingStore:
    return RecordingStore(store)


@pytest.fixture
def names() -> NameGenerator:
    return NameGenerator(run_id="test")
