"""
Loader interfaces for passbleed.

Each concrete loader reads one kind of corpus file into a fresh ``DomainSet``
and returns it wrapped in a ``LoadReport``. Fatal problems surface as
``CorpusLoadError`` subclasses labelled with the file path and loader kind.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from passbleed.domain.models import LoadReport
from passbleed.errors import CorpusLoadError


@runtime_checkable
class CorpusLoader(Protocol):
    """
    Common interface all corpus loaders implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    kind : str
        Human label used in error messages ("password export", "leak corpus").
    description : str
        A human-friendly summary of what the loader reads.
    """

    name: str
    kind: str
    description: str

    def load(self, path: Path | str) -> LoadReport:
        """
        Read ``path`` into a new DomainSet.

        Raises
        ------
        CorpusLoadError
            The file could not be opened or read as a whole.
        """
        ...


class AbstractCorpusLoader(abc.ABC):
    """
    ABC helper holding the file-opening logic shared by loaders.

    Subclasses set ``name``, ``kind`` and ``description`` and implement ``load``.
    """

    name: str
    kind: str
    description: str
    encoding: str = "utf-8-sig"

    def _open(self, path: Path, newline: str | None = None) -> IO[str]:
        try:
            return path.open("r", encoding=self.encoding, newline=newline)
        except OSError as exc:
            reason = f"cannot open file: {exc.strerror or exc}"
            raise CorpusLoadError(reason, path=path, kind=self.kind) from exc

    @abc.abstractmethod
    def load(self, path: Path | str) -> LoadReport:  # pragma: no cover - interface only
        """Read the corpus file and return its report."""
        raise NotImplementedError


__all__ = [
    "AbstractCorpusLoader",
    "CorpusLoader",
]
