"""Error kinds raised while listing, changing and persisting repositories."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

NO_REPOSITORIES_MESSAGE = (
    "There are no repositories configured yet. Add one before changing priorities."
)


class RepositoryError(RuntimeError):
    """Base class for repository list failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = path


class NotExistError(RepositoryError):
    """Raised when the repositories file has not been created yet."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(NO_REPOSITORIES_MESSAGE, path)


class ParseError(RepositoryError):
    """Raised when the repositories file does not hold a valid repository list."""


class NotFoundError(RepositoryError):
    """Raised when a named repository is not in the list."""

    def __init__(self, name: str) -> None:
        super().__init__(f"repository {name!r} not found")
        self.name = name


class WriteError(RepositoryError):
    """Raised when persisting the repository list fails."""


class ListError(RepositoryError):
    """Raised for any other failure while obtaining the repository list."""
