"""
Exception hierarchy for passbleed.

Two families:

- ``CorpusLoadError`` and subclasses are fatal for the file being loaded and
  propagate to the caller with the offending path attached.
- ``DomainExtractionError`` and subclasses describe a single row that could not
  be turned into a domain; loaders absorb them and count the row as skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PassbleedError(Exception):
    """Base class for all passbleed errors."""


class CorpusLoadError(PassbleedError):
    """A corpus file could not be loaded at all."""

    def __init__(
        self,
        reason: str,
        path: Optional[Path | str] = None,
        kind: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.path = Path(path) if path is not None else None
        self.kind = kind
        super().__init__(str(self))

    def with_source(self, path: Path | str, kind: str) -> CorpusLoadError:
        """Return a copy of this error labelled with the file it came from."""
        return type(self)(self.reason, path=path, kind=kind)

    def __str__(self) -> str:
        if self.path is None:
            return self.reason
        label = f"{self.kind} " if self.kind else ""
        return f"{label}{self.path}: {self.reason}"


class EmptyFileError(CorpusLoadError):
    """The CSV file has no header row."""


class UnsupportedFormatError(CorpusLoadError):
    """The CSV header matches none of the known export formats."""


class CorpusReadError(CorpusLoadError):
    """Reading failed part-way through the file."""


class DomainExtractionError(PassbleedError):
    """A field value could not be reduced to a registrable domain."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class MalformedURLError(DomainExtractionError):
    """The value does not parse as a URL with a usable host."""


class UnregistrableHostError(DomainExtractionError):
    """The host is a public suffix, an IP address, or otherwise not registrable."""


__all__ = [
    "CorpusLoadError",
    "CorpusReadError",
    "DomainExtractionError",
    "EmptyFileError",
    "MalformedURLError",
    "PassbleedError",
    "UnregistrableHostError",
    "UnsupportedFormatError",
]
