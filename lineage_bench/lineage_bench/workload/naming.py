"""Collision-free, reproducible names for seeded types and nodes.

Names combine a run identifier, a per-generator batch counter and the
position inside the batch::

    pre_insert_artifact_type-1718000000000000000.0-0-17
    pre_insert_context-nightly-3-0

The run identifier defaults to the wall clock in nanoseconds at construction
time plus a per-process generator counter, which keeps names distinct across
benchmark runs against a persistent store and across generators in one
run.  Tests pass a fixed ``run_id`` to get the same names every time.
"""

from __future__ import annotations

import itertools
import time

from lineage_bench.config import BenchSettings
from lineage_bench.models.metadata import NodeFamily

_generators = itertools.count()


class NameGenerator:
    """Produce batches of unique type and node names for one benchmark run."""

    def __init__(self, run_id: str | None = None, prefix: str = "pre_insert") -> None:
        self.run_id = run_id if run_id is not None else f"{time.time_ns()}.{next(_generators)}"
        self.prefix = prefix
        self._batches = itertools.count()

    @classmethod
    def from_settings(cls, settings: BenchSettings) -> NameGenerator:
        return cls(run_id=settings.run_id, prefix=settings.name_prefix)

    def type_names(self, family: NodeFamily, count: int) -> list[str]:
        """Return *count* fresh names for types of *family*."""
        return self._batch(f"{self.prefix}_{family.value.lower()}_type", count)

    def node_names(self, family: NodeFamily, count: int) -> list[str]:
        """Return *count* fresh names for nodes of *family*."""
        return self._batch(f"{self.prefix}_{family.value.lower()}", count)

    def _batch(self, stem: str, count: int) -> list[str]:
        batch = next(self._batches)
        return [f"{stem}-{self.run_id}-{batch}-{index}" for index in range(count)]
