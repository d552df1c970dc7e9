"""
Password-export loader: CSV from a password manager -> DomainSet.

The header decides the export format and therefore which column carries the
URL. Every following row is run through the DomainExtractor; rows that fail to
parse or reduce are skipped and only show up in the skipped count.
"""

from __future__ import annotations

import contextlib
import csv
from pathlib import Path
from typing import Any, Iterator, List, Optional

from passbleed.config import get_settings
from passbleed.domain.models import DomainSet, LoadReport
from passbleed.errors import CorpusLoadError, CorpusReadError, DomainExtractionError
from passbleed.extractor import DomainExtractor
from passbleed.formats import detect_format
from passbleed.loaders.abstract import AbstractCorpusLoader
from passbleed.utils.logging import get_logger

log = get_logger(__name__)


def _records(reader: Any) -> Iterator[Optional[List[str]]]:
    """
    Yield non-blank records from ``reader``. A row that fails to parse yields
    ``None`` and iteration carries on with the next line.
    """
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            log.debug("Unparseable CSV row", extra={"line": reader.line_num, "error": str(exc)})
            yield None
            continue
        if record:
            yield record


@contextlib.contextmanager
def _field_size_limit(limit: int) -> Iterator[None]:
    """Set the csv module's field limit for the duration of one load."""
    previous = csv.field_size_limit(limit)
    try:
        yield
    finally:
        csv.field_size_limit(previous)


class PasswordExportLoader(AbstractCorpusLoader):
    """
    Load a LastPass, KeePass 1.x, KeePassX or 1Password CSV export.

    Blank records are ignored, including any before the header. A row too
    short to reach the URL column is skipped like any other bad row.
    """

    name: str = "password_export"
    kind: str = "password export"
    description: str = "Password-manager CSV export, reduced to registrable domains."

    def __init__(
        self,
        extractor: Optional[DomainExtractor] = None,
        field_size_limit: Optional[int] = None,
    ) -> None:
        self._extractor = extractor
        self._field_size_limit = field_size_limit

    @property
    def extractor(self) -> DomainExtractor:
        if self._extractor is None:
            self._extractor = DomainExtractor()
        return self._extractor

    def load(self, path: Path | str) -> LoadReport:
        path = Path(path)
        domains = DomainSet()
        rows_read = 0
        rows_skipped = 0

        limit = self._field_size_limit or get_settings().csv_field_size_limit
        with _field_size_limit(limit), self._open(path, newline="") as handle:
            reader = csv.reader(handle)
            try:
                records = _records(reader)
                header = next(records, [])
                if header is None:
                    raise CorpusReadError("unreadable header row", path=path, kind=self.kind)
                try:
                    signature = detect_format(header)
                except CorpusLoadError as exc:
                    raise exc.with_source(path, self.kind) from exc

                log.info(
                    f"Detected {signature.label} export",
                    extra={"path": str(path), "format": signature.schema.value, "column": signature.column},
                )
                column = signature.column

                for record in records:
                    rows_read += 1
                    if record is None:
                        rows_skipped += 1
                        continue
                    if column >= len(record):
                        log.debug(
                            "Row too short for URL column",
                            extra={"line": reader.line_num, "fields": len(record)},
                        )
                        rows_skipped += 1
                        continue
                    try:
                        domains.add(self.extractor.extract(record[column]))
                    except DomainExtractionError as exc:
                        log.debug("Skipping row", extra={"line": reader.line_num, "error": str(exc)})
                        rows_skipped += 1
            except UnicodeDecodeError as exc:
                raise CorpusReadError(f"cannot decode file: {exc}", path=path, kind=self.kind) from exc
            except OSError as exc:
                raise CorpusReadError(f"read failed: {exc}", path=path, kind=self.kind) from exc

        log.info(
            f"{self.kind.capitalize()} loaded: {domains.cardinality()} domains",
            extra={
                "path": str(path),
                "domains": domains.cardinality(),
                "rows_read": rows_read,
                "rows_skipped": rows_skipped,
            },
        )
        return LoadReport(
            path=path,
            kind=self.kind,
            domains=domains,
            csv_schema=signature.schema,
            column=column,
            rows_read=rows_read,
            rows_skipped=rows_skipped,
        )


__all__ = ["PasswordExportLoader"]
