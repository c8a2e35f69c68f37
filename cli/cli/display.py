"""Rich output formatting for the lineage-bench CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that machine-readable output on *stdout* is never
polluted with human-readable decoration.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

_FAMILY_COLOURS: dict[str, str] = {
    "ARTIFACT": "cyan",
    "EXECUTION": "magenta",
    "CONTEXT": "yellow",
}


def _coloured_family(family: str) -> str:
    """Return a Rich markup string with the family colour-coded."""
    colour = _FAMILY_COLOURS.get(family, "white")
    return f"[{colour}]{family}[/{colour}]"


def display_store_counts(
    console: Console,
    type_counts: dict[str, int],
    node_counts: dict[str, int],
) -> None:
    """Render per-family type and node counts of a seeded store.

    Parameters
    ----------
    console:
        Rich console to write to.
    type_counts:
        Number of existing types keyed by family name.
    node_counts:
        Number of existing nodes keyed by family name.
    """
    table = Table(title="Metadata store", show_lines=False, pad_edge=True, expand=False)
    table.add_column("Family", style="bold")
    table.add_column("Types", justify="right")
    table.add_column("Nodes", justify="right")

    for family in type_counts:
        table.add_row(
            _coloured_family(family),
            str(type_counts[family]),
            str(node_counts.get(family, 0)),
        )

    console.print(table)


def display_sample(console: Console, title: str, sizes: dict[str, int]) -> None:
    """Render the sizes of the collections returned by one sampler call."""
    if not sizes:
        console.print("[dim]Nothing sampled.[/dim]")
        return

    table = Table(title=title, show_lines=False, pad_edge=True, expand=False)
    table.add_column("Collection", style="bold")
    table.add_column("Size", justify="right")
    for label, size in sizes.items():
        table.add_row(label, str(size))

    console.print(table)
