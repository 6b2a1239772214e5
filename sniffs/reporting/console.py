# Rich console output: render the sniff catalog for the terminal, or as JSON.

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sniffs.catalog.models import Catalog, StandardSniffs

# Status -> Rich style
STATUS_STYLE = {
    "active": "bold green",
    "deprecated": "bold yellow",
}


def _sniff_table(entry: StandardSniffs) -> Table:
    table = Table(
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE,
        padding=(0, 1),
        expand=False,
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Sniff", style="white")
    table.add_column("Status", width=12)

    rows = [(name, "active") for name in entry.active]
    rows += [(name, "deprecated") for name in entry.deprecated]
    for i, (name, status) in enumerate(rows, start=1):
        table.add_row(str(i), name, Text(status.upper(), style=STATUS_STYLE[status]))
    return table


def print_catalog(
    catalog: Catalog,
    include_empty: bool = True,
    console: Console | None = None,
) -> None:
    """
    Print one table per standard followed by a summary.

    Standards owning no sniffs are listed as empty unless include_empty is False.
    """
    if console is None:
        console = Console()

    for standard, entry in catalog.standards.items():
        if not len(entry) and not include_empty:
            continue

        console.print()
        console.print(Panel(
            f"[bold cyan]{standard}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))
        if not len(entry):
            console.print("  [dim]No sniffs.[/dim]")
            continue
        console.print(_sniff_table(entry))

    _print_summary(catalog, console)


def _print_summary(catalog: Catalog, console: Console) -> None:
    """Print totals per standard and overall."""
    table = Table(
        title="Sniffs Summary",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    table.add_column("Standard", style="white")
    table.add_column("Active", justify="right", width=8)
    table.add_column("Deprecated", justify="right", width=10)

    for standard, entry in catalog.standards.items():
        table.add_row(standard, str(len(entry.active)), str(len(entry.deprecated)))

    active = catalog.total_active()
    deprecated = catalog.total_deprecated()
    console.print()
    console.print(Panel(table, border_style="cyan", box=box.ROUNDED))
    console.print(
        Panel(
            f"[bold]{active + deprecated} sniff{'s' if active + deprecated != 1 else ''}[/bold]"
            f" | [{STATUS_STYLE['active']}]{active} active[/]"
            f" | [{STATUS_STYLE['deprecated']}]{deprecated} deprecated[/]",
            title="Summary",
            border_style="green" if deprecated == 0 else "yellow",
            box=box.ROUNDED,
        )
    )


def print_standards(standards: Sequence[str], console: Console | None = None) -> None:
    """Print installed standard names, one per line."""
    if console is None:
        console = Console()
    for standard in standards:
        console.print(standard, highlight=False)


def catalog_to_json(catalog: Catalog, include_empty: bool = True) -> str:
    """Serialize as {"standards": {"<standard>": {"active": [...], "deprecated": [...]}}}."""
    standards = {
        name: entry.model_dump()
        for name, entry in catalog.standards.items()
        if include_empty or len(entry)
    }
    return Catalog.model_validate({"standards": standards}).model_dump_json(indent=2)
