"""
Leak-corpus loader: newline-delimited domain list -> DomainSet.

Entries are taken as already canonical and inserted verbatim; they do not go
through the DomainExtractor. Duplicates and ordering are irrelevant.
"""

from __future__ import annotations

from pathlib import Path

from passbleed.domain.models import DomainSet, LoadReport
from passbleed.errors import CorpusReadError
from passbleed.loaders.abstract import AbstractCorpusLoader
from passbleed.utils.logging import get_logger

log = get_logger(__name__)


class LeakCorpusLoader(AbstractCorpusLoader):
    """
    Read one domain per line. Surrounding whitespace is stripped and blank
    lines are ignored; nothing else is normalised.
    """

    name: str = "leak_corpus"
    kind: str = "leak corpus"
    description: str = "Plain-text list of affected domains, one per line."

    def load(self, path: Path | str) -> LoadReport:
        path = Path(path)
        domains = DomainSet()
        rows_read = 0
        rows_skipped = 0

        with self._open(path) as handle:
            try:
                for line in handle:
                    rows_read += 1
                    entry = line.strip()
                    if not entry:
                        rows_skipped += 1
                        continue
                    domains.add(entry)
            except UnicodeDecodeError as exc:
                raise CorpusReadError(f"cannot decode file: {exc}", path=path, kind=self.kind) from exc
            except OSError as exc:
                raise CorpusReadError(f"read failed: {exc}", path=path, kind=self.kind) from exc

        log.info(
            f"{self.kind.capitalize()} loaded: {domains.cardinality()} domains",
            extra={"path": str(path), "domains": domains.cardinality(), "lines": rows_read},
        )
        return LoadReport(
            path=path,
            kind=self.kind,
            domains=domains,
            rows_read=rows_read,
            rows_skipped=rows_skipped,
        )


__all__ = ["LeakCorpusLoader"]
