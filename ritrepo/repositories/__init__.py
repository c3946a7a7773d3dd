"""Repository list interfaces and implementations.

This package defines the abstract lister/writer interfaces for the persisted
repository list and concrete implementations, such as the JSON file adapters
under :mod:`ritrepo.repositories.json_file`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from ritrepo.domain.entities.repository import RepositoryList

from .errors import (
    ListError,
    NotExistError,
    NotFoundError,
    ParseError,
    RepositoryError,
    WriteError,
)


class RepositoryLister(ABC):
    """Loads the persisted repository list."""

    @abstractmethod
    def list(self) -> RepositoryList:
        """Return the repositories in storage order."""


class RepositoryWriter(ABC):
    """Persists a repository list."""

    @abstractmethod
    def write(self, repos: RepositoryList) -> None:
        """Replace the persisted list with ``repos``."""


class RepositoryListWriter(RepositoryLister, RepositoryWriter):
    """Both halves of read-modify-write over the repository list."""


class ListWriter(RepositoryListWriter):
    """Pairs an independent lister and writer."""

    def __init__(self, lister: RepositoryLister, writer: RepositoryWriter) -> None:
        self._lister = lister
        self._writer = writer

    def list(self) -> RepositoryList:
        return self._lister.list()

    def write(self, repos: RepositoryList) -> None:
        self._writer.write(repos)


__all__ = [
    "ListError",
    "ListWriter",
    "NotExistError",
    "NotFoundError",
    "ParseError",
    "RepositoryError",
    "RepositoryListWriter",
    "RepositoryLister",
    "RepositoryWriter",
    "WriteError",
]
