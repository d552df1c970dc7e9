"""
Sample data generator for passbleed.

Writes a deterministic pseudo-random password-manager export in any supported
format, plus a leak corpus that overlaps it, so the full pipeline can be
exercised without real credentials.
"""

from __future__ import annotations

import csv
import random
import sys
import time
from pathlib import Path

import typer

from passbleed.domain.models import CsvSchema
from passbleed.formats import SIGNATURES

app = typer.Typer(help="Generate a synthetic password export and leak corpus.")

_HEADERS: dict[CsvSchema, list[str]] = {
    CsvSchema.LASTPASS: ["url", "username", "password", "extra", "name", "grouping", "fav"],
    CsvSchema.KEEPASS1: ["Account", "Login Name", "Password", "Web Site", "Comments"],
    CsvSchema.KEEPASS1_GROUPED: ["Group", "Title", "Web Site", "Username", "Password", "Notes"],
    CsvSchema.KEEPASSX: ["Group", "Title", "Username", "Password", "URL", "Notes"],
    CsvSchema.ONEPASSWORD: [
        "ainfo",
        "autosubmit",
        "custom",
        "email",
        "master-password",
        "notesPlain",
        "password",
        "title",
        "urls",
        "username",
    ],
}

_WORDS = ["acme", "bank", "cloud", "forum", "mail", "news", "shop", "social", "travel", "video"]
_SUFFIXES = ["com", "org", "net", "co.uk", "com.au", "de", "io"]
_SUBDOMAINS = ["", "www.", "login.", "accounts.", "m."]
_URL_SHAPES = ["{host}", "http://{host}", "https://{host}/login", "https://{host}:8443/?next=/"]


def _column_for(schema: CsvSchema) -> int:
    return next(sig.column for sig in SIGNATURES if sig.schema is schema)


def _random_domain(rng: random.Random) -> str:
    return f"{rng.choice(_WORDS)}{rng.randint(1, 999)}.{rng.choice(_SUFFIXES)}"


def _generate_export_csv(
    csv_path: Path, schema: CsvSchema, rows: int, seed: int
) -> list[str]:
    """Write the export and return the registrable domain behind every row."""
    rng = random.Random(seed)
    header = _HEADERS[schema]
    column = _column_for(schema)
    domains: list[str] = []

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for i in range(rows):
            domain = _random_domain(rng)
            host = rng.choice(_SUBDOMAINS) + domain
            record = [f"field{i}" for _ in header]
            record[column] = rng.choice(_URL_SHAPES).format(host=host)
            writer.writerow(record)
            domains.append(domain)
    return domains


def _generate_leak_corpus(
    leak_path: Path, saved_domains: list[str], overlap: int, extra: int, seed: int
) -> list[str]:
    """Write a sorted, de-duplicated leak list; return the overlapping domains."""
    rng = random.Random(seed)
    unique_saved = sorted(set(saved_domains))
    shared = rng.sample(unique_saved, min(overlap, len(unique_saved)))
    leaked = set(shared)
    while len(leaked) < len(shared) + extra:
        leaked.add(f"leak-{_random_domain(rng)}")
    leak_path.write_text("".join(f"{d}\n" for d in sorted(leaked)), encoding="utf-8")
    return sorted(shared)


@app.command()
def main(
    output_dir: Path = typer.Option(
        Path("sample-data"),
        "--output-dir",
        "-o",
        help="Directory for export.csv and leaks.txt.",
    ),
    schema: CsvSchema = typer.Option(
        CsvSchema.KEEPASSX,
        "--format",
        "-f",
        help="Export format to emulate.",
    ),
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        help="Number of credential rows to generate.",
    ),
    overlap: int = typer.Option(
        25,
        "--overlap",
        help="How many saved domains also appear in the leak corpus.",
    ),
    extra: int = typer.Option(
        5_000,
        "--extra",
        help="Leaked domains that are not in the export.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
) -> None:
    """
    Generate a synthetic export and a leak corpus with a known overlap.
    """
    if schema is CsvSchema.UNKNOWN:
        raise typer.BadParameter("pick a concrete export format", param_hint="--format")

    start = time.perf_counter()
    output_dir.mkdir(parents=True, exist_ok=True)
    export_path = output_dir / "export.csv"
    leak_path = output_dir / "leaks.txt"

    typer.echo(f"Generating {rows:,} {schema.value} rows -> {export_path} (seed={seed})")
    saved = _generate_export_csv(export_path, schema, rows=rows, seed=seed)
    shared = _generate_leak_corpus(leak_path, saved, overlap=overlap, extra=extra, seed=seed)

    duration = time.perf_counter() - start
    typer.echo(f"Leak corpus -> {leak_path} ({len(shared)} overlapping domains)")
    typer.echo(f"Done in {duration:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
