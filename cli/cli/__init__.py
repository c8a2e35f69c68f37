"""Command line interface for lineage-bench."""
