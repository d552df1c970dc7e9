"""
Export format detection.

Classifies the header row of a password-manager CSV export into one of the
supported schemas. Signatures are tried in priority order and the first match
wins; there is no fuzzy matching.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from passbleed.domain.models import CsvSchema, FormatSignature
from passbleed.errors import EmptyFileError, UnsupportedFormatError

SIGNATURES: Tuple[FormatSignature, ...] = (
    FormatSignature(CsvSchema.LASTPASS, column=0, header="url", label="LastPass"),
    FormatSignature(CsvSchema.KEEPASS1, column=3, header="Web Site", label="KeePass 1.x"),
    FormatSignature(
        CsvSchema.KEEPASS1_GROUPED, column=2, header="Web Site", label="KeePass 1.x (grouped)"
    ),
    FormatSignature(CsvSchema.KEEPASSX, column=4, header="URL", label="KeePassX / KeePassXC"),
    FormatSignature(CsvSchema.ONEPASSWORD, column=8, header="urls", label="1Password"),
)


def supported_formats() -> list[str]:
    """Human-readable names of the supported exporters, in priority order."""
    return [sig.label for sig in SIGNATURES]


def detect_format(header: Optional[Sequence[str]]) -> FormatSignature:
    """
    Match a CSV header row against the known export signatures.

    Parameters
    ----------
    header : sequence of str or None
        The first record of the file. ``None`` or an empty record means the
        file had no header at all.

    Returns
    -------
    FormatSignature
        The first signature in priority order that the header satisfies.

    Raises
    ------
    EmptyFileError
        No header row was supplied.
    UnsupportedFormatError
        The header matches no known exporter.
    """
    if not header:
        raise EmptyFileError("empty CSV file")
    for signature in SIGNATURES:
        if signature.matches(header):
            return signature
    raise UnsupportedFormatError(
        "unknown CSV format, please use a supported export format "
        f"({', '.join(supported_formats())})"
    )


__all__ = ["SIGNATURES", "detect_format", "supported_formats"]
