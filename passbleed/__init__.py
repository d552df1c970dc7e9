"""
passbleed - find saved passwords affected by a domain leak.

Cross-references a password-manager CSV export (LastPass, KeePass 1.x,
KeePassX, 1Password) against a list of domains known to be affected by a data
leak incident and reports which saved sites are potentially compromised.

The pipeline:

- detect the export format from the CSV header
- reduce every saved URL to its registrable domain (public suffix + one label)
- load the leak list verbatim
- intersect the two domain sets
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from passbleed.comparator import compare, intersect
from passbleed.config import Settings, get_settings
from passbleed.domain.models import (
    ComparisonResult,
    CsvSchema,
    Domain,
    DomainSet,
    FormatSignature,
    LoadReport,
)
from passbleed.errors import (
    CorpusLoadError,
    CorpusReadError,
    DomainExtractionError,
    EmptyFileError,
    MalformedURLError,
    PassbleedError,
    UnregistrableHostError,
    UnsupportedFormatError,
)
from passbleed.extractor import DomainExtractor, PublicSuffixResolver, SuffixResolver
from passbleed.formats import SIGNATURES, detect_format
from passbleed.loaders import LeakCorpusLoader, PasswordExportLoader
from passbleed.orchestrator import run_check
from passbleed.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain model
    "ComparisonResult",
    "CsvSchema",
    "Domain",
    "DomainSet",
    "FormatSignature",
    "LoadReport",
    # Pipeline
    "SIGNATURES",
    "detect_format",
    "DomainExtractor",
    "PublicSuffixResolver",
    "SuffixResolver",
    "LeakCorpusLoader",
    "PasswordExportLoader",
    "compare",
    "intersect",
    "run_check",
    # Errors
    "PassbleedError",
    "CorpusLoadError",
    "CorpusReadError",
    "EmptyFileError",
    "UnsupportedFormatError",
    "DomainExtractionError",
    "MalformedURLError",
    "UnregistrableHostError",
    # Logging
    "configure_logging",
    "get_logger",
]
