"""
Loaders package for passbleed.

Re-exports the loader interfaces and the concrete loaders so downstream code
can import from `passbleed.loaders` directly.
"""

from passbleed.loaders.abstract import AbstractCorpusLoader, CorpusLoader
from passbleed.loaders.leak_corpus import LeakCorpusLoader
from passbleed.loaders.password_export import PasswordExportLoader

__all__ = [
    # Abstracts
    "AbstractCorpusLoader",
    "CorpusLoader",
    # Concrete loaders
    "LeakCorpusLoader",
    "PasswordExportLoader",
]
