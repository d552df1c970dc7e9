"""
Domain package for passbleed.

Exports the value types shared by the detector, extractor, loaders and
comparator. Keep this package focused on data definitions.
"""

from passbleed.domain.models import (
    ComparisonResult,
    CsvSchema,
    Domain,
    DomainSet,
    FormatSignature,
    LoadReport,
)

__all__ = [
    "ComparisonResult",
    "CsvSchema",
    "Domain",
    "DomainSet",
    "FormatSignature",
    "LoadReport",
]
