"""End-to-end seeding and sampling against a SQLite-backed store.

Mirrors a benchmark setup phase: 51/52/53 types, then 101/102/103 nodes,
followed by every sampler entry point a workload stage can call.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from lineage_bench.models.metadata import NodeFamily
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
from lineage_bench.state.database import create_tables
from lineage_bench.state.sql_store import SqlMetadataStore
from lineage_bench.state.sqlite_adapter import get_local_engine
from lineage_bench.workload.naming import NameGenerator
from lineage_bench.workload.sampler import get_existing_nodes, get_existing_types
from lineage_bench.workload.seeder import insert_nodes_in_db, insert_types_in_db

_NUM_ARTIFACT_TYPES = 51
_NUM_EXECUTION_TYPES = 52
_NUM_CONTEXT_TYPES = 53

_NUM_ARTIFACTS = 101
_NUM_EXECUTIONS = 102
_NUM_CONTEXTS = 103


@pytest_asyncio.fixture
async def seeded_store(tmp_path: Path) -> AsyncIterator[SqlMetadataStore]:
    engine = get_local_engine(tmp_path / "bench.db")
    await create_tables(engine)
    store = SqlMetadataStore(engine)
    names = NameGenerator(run_id="integration")
    await insert_types_in_db(_NUM_ARTIFACT_TYPES, _NUM_EXECUTION_TYPES, _NUM_CONTEXT_TYPES, store, names=names)
    await insert_nodes_in_db(_NUM_ARTIFACTS, _NUM_EXECUTIONS, _NUM_CONTEXTS, store, names=names)
    yield store
    await engine.dispose()


class TestSeededStore:
    @pytest.mark.asyncio
    async def test_type_counts(self, seeded_store: SqlMetadataStore):
        assert len(await seeded_store.list_types(NodeFamily.ARTIFACT)) == _NUM_ARTIFACT_TYPES
        assert len(await seeded_store.list_types(NodeFamily.EXECUTION)) == _NUM_EXECUTION_TYPES
        assert len(await seeded_store.list_types(NodeFamily.CONTEXT)) == _NUM_CONTEXT_TYPES

    @pytest.mark.asyncio
    async def test_node_counts(self, seeded_store: SqlMetadataStore):
        assert len(await seeded_store.list_nodes(NodeFamily.ARTIFACT)) == _NUM_ARTIFACTS
        assert len(await seeded_store.list_nodes(NodeFamily.EXECUTION)) == _NUM_EXECUTIONS
        assert len(await seeded_store.list_nodes(NodeFamily.CONTEXT)) == _NUM_CONTEXTS

    @pytest.mark.asyncio
    async def test_every_type_used(self, seeded_store: SqlMetadataStore):
        # More nodes than types, so round-robin touches every type.
        for family in NodeFamily:
            type_ids = {t.id for t in await seeded_store.list_types(family)}
            used = {n.type_id for n in await seeded_store.list_nodes(family)}
            assert used == type_ids


class TestSampling:
    @pytest.mark.asyncio
    async def test_types_with_fill_types_config(self, seeded_store: SqlMetadataStore):
        expected = {
            TypeSpecification.ARTIFACT_TYPE: _NUM_ARTIFACT_TYPES,
            TypeSpecification.EXECUTION_TYPE: _NUM_EXECUTION_TYPES,
            TypeSpecification.CONTEXT_TYPE: _NUM_CONTEXT_TYPES,
        }
        for specification, count in expected.items():
            types = await get_existing_types(FillTypesConfig(specification=specification), seeded_store)
            assert len(types) == count

    @pytest.mark.asyncio
    async def test_types_with_fill_nodes_config(self, seeded_store: SqlMetadataStore):
        expected = {
            NodeSpecification.ARTIFACT: _NUM_ARTIFACT_TYPES,
            NodeSpecification.EXECUTION: _NUM_EXECUTION_TYPES,
            NodeSpecification.CONTEXT: _NUM_CONTEXT_TYPES,
        }
        for specification, count in expected.items():
            types = await get_existing_types(FillNodesConfig(specification=specification), seeded_store)
            assert len(types) == count

    @pytest.mark.asyncio
    async def test_nodes_with_fill_nodes_config(self, seeded_store: SqlMetadataStore):
        expected = {
            NodeSpecification.ARTIFACT: _NUM_ARTIFACTS,
            NodeSpecification.EXECUTION: _NUM_EXECUTIONS,
            NodeSpecification.CONTEXT: _NUM_CONTEXTS,
        }
        for specification, count in expected.items():
            nodes = await get_existing_nodes(FillNodesConfig(specification=specification), seeded_store)
            assert len(nodes) == count

    @pytest.mark.asyncio
    async def test_nodes_with_fill_context_edges_config(self, seeded_store: SqlMetadataStore):
        non_context, context = await get_existing_nodes(
            FillContextEdgesConfig(specification=ContextEdgeSpecification.ATTRIBUTION), seeded_store
        )
        assert len(non_context) == _NUM_ARTIFACTS
        assert len(context) == _NUM_CONTEXTS

        non_context, context = await get_existing_nodes(
            FillContextEdgesConfig(specification=ContextEdgeSpecification.ASSOCIATION), seeded_store
        )
        assert len(non_context) == _NUM_EXECUTIONS
        assert len(context) == _NUM_CONTEXTS

    @pytest.mark.asyncio
    async def test_nodes_with_fill_events_config(self, seeded_store: SqlMetadataStore):
        artifacts, executions = await get_existing_nodes(
            FillEventsConfig(specification=EventSpecification.OUTPUT), seeded_store
        )
        assert len(artifacts) == _NUM_ARTIFACTS
        assert len(executions) == _NUM_EXECUTIONS

    @pytest.mark.asyncio
    async def test_concurrent_samplers_agree(self, seeded_store: SqlMetadataStore):
        config = FillContextEdgesConfig(specification=ContextEdgeSpecification.ASSOCIATION)
        results = await asyncio.gather(*(get_existing_nodes(config, seeded_store) for _ in range(4)))
        for non_context, context in results:
            assert len(non_context) == _NUM_EXECUTIONS
            assert len(context) == _NUM_CONTEXTS
