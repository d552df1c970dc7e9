"""
Orchestrator for a full check: load both corpora, then compare them.

Usage:
    from passbleed.orchestrator import run_check

    result = run_check("keepass.csv", "sorted_unique_cf.txt")
    for domain in result.sorted_endangered():
        print(domain)

Loads run one after the other; each file is closed before the next load
starts. Any ``CorpusLoadError`` stops the run and propagates unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from passbleed.comparator import compare
from passbleed.domain.models import ComparisonResult, LoadReport
from passbleed.errors import CorpusLoadError
from passbleed.extractor import DomainExtractor, SuffixResolver
from passbleed.loaders.abstract import CorpusLoader
from passbleed.loaders.leak_corpus import LeakCorpusLoader
from passbleed.loaders.password_export import PasswordExportLoader
from passbleed.utils.logging import get_logger

log = get_logger(__name__)


def _loaders(resolver: Optional[SuffixResolver] = None) -> Dict[str, CorpusLoader]:
    """Registry of loaders keyed by name."""
    extractor = DomainExtractor(resolver) if resolver is not None else None
    return {
        "password_export": PasswordExportLoader(extractor=extractor),
        "leak_corpus": LeakCorpusLoader(),
    }


def _run_loader(loader: CorpusLoader, path: Path) -> LoadReport:
    log.info(f"[LOAD START] {loader.kind}", extra={"loader": loader.name, "path": str(path)})
    try:
        report = loader.load(path)
    except CorpusLoadError as exc:
        log.error(
            f"[LOAD FAILED] {loader.kind}",
            extra={"loader": loader.name, "path": str(path), "reason": exc.reason},
        )
        raise
    log.info(
        f"[LOAD SUCCESS] {loader.kind}",
        extra={
            "loader": loader.name,
            "domains": report.cardinality,
            "rows_skipped": report.rows_skipped,
        },
    )
    return report


def run_check(
    export_path: Path | str,
    leak_path: Path | str,
    resolver: Optional[SuffixResolver] = None,
) -> ComparisonResult:
    """
    Load the password export and the leak corpus, and intersect them.

    Parameters
    ----------
    export_path : Path | str
        Password-manager CSV export.
    leak_path : Path | str
        Newline-delimited list of affected domains.
    resolver : SuffixResolver | None
        Public suffix capability for the export loader. Defaults to the
        shared tldextract-backed resolver.

    Returns
    -------
    ComparisonResult
        Counts for each corpus and the endangered domains.

    Raises
    ------
    CorpusLoadError
        Either file could not be loaded.
    """
    loaders = _loaders(resolver)
    export = _run_loader(loaders["password_export"], Path(export_path))
    leaks = _run_loader(loaders["leak_corpus"], Path(leak_path))

    result = compare(export, leaks)
    log.info(
        f"[CHECK COMPLETE] {result.endangered_count} potentially endangered domains",
        extra={
            "export_domains": result.export_count,
            "leak_domains": result.leak_count,
            "endangered": result.endangered_count,
        },
    )
    return result


__all__ = [
    "run_check",
]
