from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from passbleed.config import get_settings
from passbleed.errors import CorpusLoadError
from passbleed.orchestrator import run_check
from passbleed.reporter import print_formats, print_results, render_json
from passbleed.utils.logging import configure_logging

app = typer.Typer(help="Check a password-manager export against a list of leaked domains.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"psl_fetch={settings.psl_fetch} psl_private={settings.psl_private_domains} "
        f"psl_cache_dir={settings.psl_cache_dir or '-'} | "
        f"csv_field_size_limit={settings.csv_field_size_limit}"
    )


@app.command()
def formats() -> None:
    """
    List supported password-manager export formats.
    """
    print_formats()


@app.command()
def check(
    export: Path = typer.Argument(..., help="Password-manager CSV export."),
    leaks: Path = typer.Argument(..., help="Leaked domain list, one domain per line."),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
    unsorted: bool = typer.Option(False, "--unsorted", help="Skip sorting the endangered domains."),
) -> None:
    """
    Report saved sites whose registrable domain appears in the leak list.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        result = run_check(export, leaks)
    except CorpusLoadError as exc:
        kind = exc.kind or "domain"
        typer.echo(f"Error building {kind} domain list ({exc.path}): {exc.reason}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(render_json(result, sort=not unsorted))
    else:
        print_results(result, sort=not unsorted, console=Console())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
