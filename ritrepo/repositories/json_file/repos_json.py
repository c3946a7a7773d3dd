from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ritrepo.config.settings import REPOS_DIR_NAME, REPOS_FILE_NAME
from ritrepo.domain.entities.repository import RepositoryList
from ritrepo.infrastructure.file_storage import FileStorage

from .. import ListWriter, RepositoryLister, RepositoryWriter
from ..errors import ListError, NotExistError, ParseError, WriteError

logger = logging.getLogger(__name__)


def repos_file_path(home: Union[str, Path]) -> Path:
    return Path(home) / REPOS_DIR_NAME / REPOS_FILE_NAME


class ReposListerJson(RepositoryLister):
    """JSON file implementation of :class:`RepositoryLister`."""

    def __init__(self, home: Union[str, Path], storage: FileStorage) -> None:
        self._path = repos_file_path(home)
        self._storage = storage

    @property
    def path(self) -> Path:
        return self._path

    def list(self) -> RepositoryList:
        if not self._storage.exists(self._path):
            raise NotExistError(self._path)

        try:
            data = self._storage.read(self._path)
        except OSError as exc:
            raise ListError(f"read {self._path}: {exc}", self._path) from exc

        try:
            repos = RepositoryList.model_validate_json(data)
        except ValidationError as exc:
            raise ParseError(str(exc), self._path) from exc

        logger.debug("Loaded repositories", extra={"path": str(self._path), "count": len(repos)})
        return repos


class ReposWriterJson(RepositoryWriter):
    """JSON file implementation of :class:`RepositoryWriter`."""

    def __init__(self, home: Union[str, Path], storage: FileStorage) -> None:
        self._path = repos_file_path(home)
        self._storage = storage

    @property
    def path(self) -> Path:
        return self._path

    def write(self, repos: RepositoryList) -> None:
        content = repos.model_dump_json(by_alias=True, indent=2).encode("utf-8")
        try:
            self._storage.write(self._path, content)
        except OSError as exc:
            raise WriteError(f"write {self._path}: {exc}", self._path) from exc
        logger.debug("Wrote repositories", extra={"path": str(self._path), "count": len(repos)})


def json_list_writer(home: Union[str, Path], storage: FileStorage) -> ListWriter:
    """Lister and writer sharing ``<home>/repos/repositories.json``."""
    return ListWriter(ReposListerJson(home, storage), ReposWriterJson(home, storage))
