"""lineage-bench: seeding and sampling for lineage metadata store benchmarks."""

__version__ = "0.1.0"
