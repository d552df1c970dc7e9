"""
Pytest configuration for passbleed.

Provides fixtures for:
- Writing CSV exports and leak lists into a temporary directory
- A small in-memory SuffixResolver so unit tests do not depend on the PSL
- A tldextract-backed resolver pinned to the bundled PSL snapshot
- Resetting process-wide state (settings cache, logging)
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Generator, Sequence

import pytest

from passbleed.config import get_settings
from passbleed.errors import UnregistrableHostError
from passbleed.extractor import DomainExtractor, PublicSuffixResolver


class FakeSuffixResolver:
    """
    Dictionary-backed resolver: knows a handful of multi-label suffixes and
    treats any other last label as a suffix.
    """

    MULTI_LABEL_SUFFIXES = frozenset({"co.uk", "com.au", "org.uk"})

    def __init__(self) -> None:
        self.calls: list[str] = []

    def registrable_domain(self, hostname: str) -> str:
        self.calls.append(hostname)
        labels = hostname.split(".")
        if all(label.isdigit() for label in labels):
            raise UnregistrableHostError(hostname, "ip address")
        suffix_len = 2 if ".".join(labels[-2:]) in self.MULTI_LABEL_SUFFIXES else 1
        if len(labels) <= suffix_len:
            raise UnregistrableHostError(hostname, "public suffix")
        return ".".join(labels[-(suffix_len + 1):])


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by CLI tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_resolver() -> FakeSuffixResolver:
    return FakeSuffixResolver()


@pytest.fixture
def fake_extractor(fake_resolver: FakeSuffixResolver) -> DomainExtractor:
    return DomainExtractor(fake_resolver)


@pytest.fixture(scope="session")
def psl_resolver(tmp_path_factory: pytest.TempPathFactory) -> PublicSuffixResolver:
    """
    Real Public Suffix List resolver using tldextract's bundled snapshot.

    Never touches the network; the cache lives in a session temp directory.
    """
    cache_dir = tmp_path_factory.mktemp("tldextract-cache")
    return PublicSuffixResolver(fetch=False, cache_dir=str(cache_dir))


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing rows to a CSV file under tmp_path."""

    def _write(rows: Sequence[Sequence[str]], name: str = "export.csv") -> Path:
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(rows)
        return path

    return _write


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing raw text (or bytes) to a file under tmp_path."""

    def _write(content: str | bytes, name: str = "leaks.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write
