"""Seeding and sampling primitives shared by every workload stage."""

from lineage_bench.workload.naming import NameGenerator
from lineage_bench.workload.sampler import get_existing_nodes, get_existing_types
from lineage_bench.workload.seeder import (
    insert_nodes_in_db,
    insert_types_in_db,
    seed_from_settings,
)

__all__ = [
    "NameGenerator",
    "get_existing_nodes",
    "get_existing_types",
    "insert_nodes_in_db",
    "insert_types_in_db",
    "seed_from_settings",
]
