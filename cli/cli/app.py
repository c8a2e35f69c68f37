"""lineage-bench CLI application -- Typer-based benchmark driver.

Provides commands to seed a metadata store with types and nodes and to
sample the operands a workload stage would act on.  Human-readable output
goes to *stderr* via Rich; ``--json`` sends a machine-readable summary to
*stdout* so that pipelines can compose cleanly.
"""

from __future__ import annotations

import asyncio
import json
from enum import Enum
from typing import Any

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from cli.display import display_sample, display_store_counts
from lineage_bench.config import BenchSettings, load_settings
from lineage_bench.errors import LineageBenchError
from lineage_bench.logging_config import configure_logging
from lineage_bench.models.metadata import NodeFamily
from lineage_bench.models.workload import (
    FillContextEdgesConfig,
    FillEventsConfig,
    FillNodesConfig,
    FillTypesConfig,
)
from lineage_bench.state import SqlMetadataStore, create_tables, get_engine
from lineage_bench.state.store import MetadataStore
from lineage_bench.workload import get_existing_nodes, get_existing_types, seed_from_settings

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="lineage-bench",
    help="lineage-bench - seed and sample an artifact/execution/context metadata store",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False


class SampleKind(str, Enum):
    """Workload config a ``sample`` invocation builds."""

    FILL_TYPES = "fill-types"
    FILL_NODES = "fill-nodes"
    FILL_CONTEXT_EDGES = "fill-context-edges"
    FILL_EVENTS = "fill-events"


_SAMPLE_CONFIGS: dict[SampleKind, type[BaseModel]] = {
    SampleKind.FILL_TYPES: FillTypesConfig,
    SampleKind.FILL_NODES: FillNodesConfig,
    SampleKind.FILL_CONTEXT_EDGES: FillContextEdgesConfig,
    SampleKind.FILL_EVENTS: FillEventsConfig,
}


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit structured JSON to stdout instead of human-readable output.",
    ),
) -> None:
    """Global options applied to every command."""
    global _json_output  # noqa: PLW0603
    _json_output = json_mode


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings(**overrides: Any) -> BenchSettings:
    """Build settings from the environment plus any CLI overrides that were given."""
    try:
        settings = load_settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=3) from exc
    configure_logging(settings)
    return settings


async def _store_counts(store: MetadataStore) -> dict[str, dict[str, int]]:
    types: dict[str, int] = {}
    nodes: dict[str, int] = {}
    for family in NodeFamily:
        types[family.value] = len(await store.list_types(family))
        nodes[family.value] = len(await store.list_nodes(family))
    return {"types": types, "nodes": nodes}


async def _seed(settings: BenchSettings) -> dict[str, dict[str, int]]:
    engine = get_engine(settings.database_url, settings.database_pool_size, settings.database_max_overflow)
    try:
        await create_tables(engine)
        store = SqlMetadataStore(engine)
        await seed_from_settings(settings, store)
        return await _store_counts(store)
    finally:
        await engine.dispose()


async def _sample(settings: BenchSettings, config: BaseModel) -> dict[str, int]:
    engine = get_engine(settings.database_url, settings.database_pool_size, settings.database_max_overflow)
    try:
        await create_tables(engine)
        store = SqlMetadataStore(engine)
        if isinstance(config, FillTypesConfig):
            return {"types": len(await get_existing_types(config, store))}
        if isinstance(config, FillNodesConfig):
            return {
                "types": len(await get_existing_types(config, store)),
                "nodes": len(await get_existing_nodes(config, store)),
            }
        if isinstance(config, FillContextEdgesConfig):
            non_context, context = await get_existing_nodes(config, store)
            return {"non_context_nodes": len(non_context), "context_nodes": len(context)}
        artifacts, executions = await get_existing_nodes(config, store)  # type: ignore[arg-type]
        return {"artifact_nodes": len(artifacts), "execution_nodes": len(executions)}
    finally:
        await engine.dispose()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def seed(
    artifact_types: int | None = typer.Option(None, "--artifact-types", min=0, help="Artifact types to insert."),
    execution_types: int | None = typer.Option(None, "--execution-types", min=0, help="Execution types to insert."),
    context_types: int | None = typer.Option(None, "--context-types", min=0, help="Context types to insert."),
    artifacts: int | None = typer.Option(None, "--artifacts", min=0, help="Artifacts to insert."),
    executions: int | None = typer.Option(None, "--executions", min=0, help="Executions to insert."),
    contexts: int | None = typer.Option(None, "--contexts", min=0, help="Contexts to insert."),
    database_url: str | None = typer.Option(
        None,
        "--database-url",
        help="Metadata store URL (defaults to LINEAGE_BENCH_DATABASE_URL).",
    ),
    run_id: str | None = typer.Option(
        None,
        "--run-id",
        help="Identifier embedded in generated names (defaults to a clock value).",
    ),
) -> None:
    """Insert types, then nodes, into the metadata store."""
    settings = _settings(
        database_url=database_url,
        run_id=run_id,
        num_artifact_types=artifact_types,
        num_execution_types=execution_types,
        num_context_types=context_types,
        num_artifacts=artifacts,
        num_executions=executions,
        num_contexts=contexts,
    )
    if not settings.has_seed_counts():
        console.print("[dim]Nothing to seed: all counts are zero.[/dim]")

    try:
        counts = asyncio.run(_seed(settings))
    except LineageBenchError as exc:
        console.print(f"[red]Seeding failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if _json_output:
        typer.echo(json.dumps(counts, sort_keys=True))
    else:
        display_store_counts(console, counts["types"], counts["nodes"])


@app.command()
def sample(
    kind: SampleKind = typer.Argument(..., help="Workload config to build."),
    specification: str = typer.Argument(..., help="Specification value, e.g. ARTIFACT_TYPE or ATTRIBUTION."),
    database_url: str | None = typer.Option(
        None,
        "--database-url",
        help="Metadata store URL (defaults to LINEAGE_BENCH_DATABASE_URL).",
    ),
) -> None:
    """Report the sizes of the existing entities a workload stage would sample."""
    try:
        config = _SAMPLE_CONFIGS[kind](specification=specification.upper())
    except ValidationError as exc:
        raise typer.BadParameter(
            f"{specification!r} is not a valid specification for {kind.value}",
            param_hint="SPECIFICATION",
        ) from exc

    settings = _settings(database_url=database_url)
    try:
        sizes = asyncio.run(_sample(settings, config))
    except LineageBenchError as exc:
        console.print(f"[red]Sampling failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if _json_output:
        typer.echo(json.dumps(sizes, sort_keys=True))
    else:
        display_sample(console, f"{kind.value} {specification.upper()}", sizes)
