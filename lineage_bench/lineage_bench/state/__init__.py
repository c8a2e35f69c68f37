"""Metadata store capability and its SQL and in-memory implementations."""

from lineage_bench.state.database import create_tables, get_engine, get_session
from lineage_bench.state.memory_store import InMemoryMetadataStore
from lineage_bench.state.sql_store import SqlMetadataStore
from lineage_bench.state.store import MetadataStore

__all__ = [
    "InMemoryMetadataStore",
    "MetadataStore",
    "SqlMetadataStore",
    "create_tables",
    "get_engine",
    "get_session",
]
