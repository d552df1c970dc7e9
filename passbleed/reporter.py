from __future__ import annotations

import json
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from passbleed.domain.models import ComparisonResult, LoadReport
from passbleed.formats import SIGNATURES


def _describe_load(report: LoadReport) -> str:
    line = f"{report.cardinality:,} domains found"
    if report.rows_skipped:
        line += f" [dim]({report.rows_skipped:,} of {report.rows_read:,} rows skipped)[/dim]"
    return line


def print_results(
    result: ComparisonResult,
    sort: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Render a comparison as per-corpus counts followed by a table of the
    endangered domains.
    """
    console = console or Console()

    schema = result.export.csv_schema.value if result.export.csv_schema else "unknown"
    console.print(f"Password export ([cyan]{schema}[/cyan]): {_describe_load(result.export)}")
    console.print(f"Leak corpus: {_describe_load(result.leaks)}")
    console.print()

    if not result.endangered_count:
        console.print("[green]No potentially endangered domains.[/green]")
        return

    domains = result.sorted_endangered() if sort else list(result.endangered)
    console.print(f"[bold]{result.endangered_count} potentially endangered domains:[/bold]")
    table = Table(
        box=box.ROUNDED,
        caption="Sorted alphabetically" if sort else None,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Domain", style="bold red", no_wrap=True)
    for index, domain in enumerate(domains, start=1):
        table.add_row(str(index), domain)

    console.print(table)


def render_json(result: ComparisonResult, sort: bool = True) -> str:
    """Serialize a comparison for machine consumption."""
    return json.dumps(result.to_dict(sort=sort), indent=2)


def print_formats(console: Optional[Console] = None) -> None:
    """List the supported export formats in detection priority order."""
    console = console or Console()
    table = Table(title="Supported export formats", box=box.ROUNDED)
    table.add_column("Priority", justify="right", style="dim")
    table.add_column("Exporter", style="cyan", no_wrap=True)
    table.add_column("Format id", style="magenta")
    table.add_column("URL column", justify="right")
    table.add_column("Header", style="green")
    for priority, sig in enumerate(SIGNATURES, start=1):
        table.add_row(str(priority), sig.label, sig.schema.value, str(sig.column), sig.header)
    console.print(table)
