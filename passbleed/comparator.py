"""
Comparator: intersect the password-export domains with the leak corpus.
"""

from __future__ import annotations

from passbleed.domain.models import ComparisonResult, DomainSet, LoadReport


def intersect(saved: DomainSet, leaked: DomainSet) -> DomainSet:
    """
    Domains present in both sets.

    Pure and order-independent: neither argument is modified and
    ``intersect(a, b) == intersect(b, a)``.
    """
    return saved.intersect(leaked)


def compare(export: LoadReport, leaks: LoadReport) -> ComparisonResult:
    """Build the comparison result for two loaded corpora."""
    return ComparisonResult(
        export=export,
        leaks=leaks,
        endangered=intersect(export.domains, leaks.domains).to_frozenset(),
    )


__all__ = ["compare", "intersect"]
