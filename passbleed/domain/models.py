"""
Domain models for passbleed.

Defines the canonical `Domain` value, the `DomainSet` container the loaders
populate and the comparator intersects, the closed set of supported CSV export
schemas, and the reports handed back to callers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, NewType, Optional, Sequence

from pydantic import BaseModel, Field

Domain = NewType("Domain", str)
"""A registrable domain such as ``example.com`` or ``bank.co.uk``."""


class CsvSchema(str, Enum):
    """Password-manager export layouts recognised by the format detector."""

    UNKNOWN = "unknown"
    LASTPASS = "lastpass"
    KEEPASS1 = "keepass1"
    KEEPASS1_GROUPED = "keepass1-grouped"
    KEEPASSX = "keepassx"
    ONEPASSWORD = "1password"


@dataclass(frozen=True)
class FormatSignature:
    """
    Header shape identifying one export schema.

    A header matches when it has at least ``column + 1`` fields and the field
    at ``column`` equals ``header`` exactly. The same column holds the URL or
    hostname in every data row of that export.
    """

    schema: CsvSchema
    column: int
    header: str
    label: str = ""

    @property
    def min_fields(self) -> int:
        return self.column + 1

    def matches(self, header_row: Sequence[str]) -> bool:
        return len(header_row) >= self.min_fields and header_row[self.column] == self.header


class DomainSet:
    """
    Unordered collection of unique domains.

    Thin wrapper over a built-in ``set`` so loaders and the comparator share
    one vocabulary (add, cardinality, intersect) without leaking set internals.
    """

    __slots__ = ("_items",)

    def __init__(self, domains: Iterable[str] = ()) -> None:
        self._items: set[Domain] = {Domain(d) for d in domains}

    def add(self, domain: str) -> None:
        self._items.add(Domain(domain))

    def cardinality(self) -> int:
        return len(self._items)

    def intersect(self, other: DomainSet) -> DomainSet:
        """Return a new set holding the domains present in both sets."""
        return DomainSet(self._items & other._items)

    def sorted(self) -> List[Domain]:
        return sorted(self._items)

    def to_frozenset(self) -> frozenset[Domain]:
        return frozenset(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Domain]:
        return iter(self._items)

    def __contains__(self, domain: object) -> bool:
        return domain in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DomainSet):
            return self._items == other._items
        if isinstance(other, (set, frozenset)):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = ", ".join(self.sorted()[:5])
        more = ", ..." if len(self._items) > 5 else ""
        return f"DomainSet({{{preview}{more}}})"


class LoadReport(BaseModel):
    """
    Outcome of loading one corpus file.
    """

    path: Path = Field(..., description="File the corpus was read from.")
    kind: str = Field(..., description="Human label, e.g. 'password export'.")
    domains: DomainSet = Field(..., description="Domains collected from the file.")
    csv_schema: Optional[CsvSchema] = Field(None, description="Detected export schema.")
    column: Optional[int] = Field(None, description="Column holding the URL field.")
    rows_read: int = Field(0, ge=0, description="Data rows or lines encountered.")
    rows_skipped: int = Field(0, ge=0, description="Rows that produced no domain.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @property
    def cardinality(self) -> int:
        return self.domains.cardinality()


class ComparisonResult(BaseModel):
    """
    Domains saved in the password export that also appear in the leak corpus.

    ``endangered`` is a frozenset so the intersection cannot change once
    the result exists.
    """

    export: LoadReport
    leaks: LoadReport
    endangered: FrozenSet[Domain]

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @property
    def export_count(self) -> int:
        return self.export.cardinality

    @property
    def leak_count(self) -> int:
        return self.leaks.cardinality

    @property
    def endangered_count(self) -> int:
        return len(self.endangered)

    def sorted_endangered(self) -> List[Domain]:
        return sorted(self.endangered)

    def to_dict(self, sort: bool = True) -> Dict[str, Any]:
        domains = self.sorted_endangered() if sort else list(self.endangered)
        return {
            "export": {
                "path": str(self.export.path),
                "format": self.export.csv_schema.value if self.export.csv_schema else None,
                "domains": self.export_count,
                "rows_read": self.export.rows_read,
                "rows_skipped": self.export.rows_skipped,
            },
            "leaks": {
                "path": str(self.leaks.path),
                "domains": self.leak_count,
            },
            "endangered_count": self.endangered_count,
            "endangered": domains,
        }


__all__ = [
    "ComparisonResult",
    "CsvSchema",
    "Domain",
    "DomainSet",
    "FormatSignature",
    "LoadReport",
]
