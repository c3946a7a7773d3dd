from __future__ import annotations

import logging
from typing import Optional

from ritrepo.domain.entities.repository import Repository, RepositoryList
from ritrepo.repositories import RepositoryListWriter
from ritrepo.repositories.errors import ListError, NotFoundError, RepositoryError, WriteError

logger = logging.getLogger(__name__)


def clamp_priority(priority: int, size: int) -> int:
    """Bound ``priority`` into ``[0, size - 1]``."""
    return max(0, min(priority, size - 1))


def reorder(repos: RepositoryList, name: str, priority: int) -> RepositoryList:
    """Move ``name`` to rank ``priority`` and renumber every entry.

    Entries are taken in current rank order, the target is removed and
    reinserted at the clamped position, then all ranks are rewritten to
    ``0..N-1`` so the result is contiguous even if the input was not.
    """
    target = repos.get(name)
    if target is None:
        raise NotFoundError(name)

    position = clamp_priority(priority, len(repos))
    ordered: list[Repository] = [r for r in repos.by_priority() if r.name != name]
    ordered.insert(position, target)
    return RepositoryList([repo.with_priority(i) for i, repo in enumerate(ordered)])


class PrioritySetter:
    """Changes the lookup precedence of one repository.

    Every call reads the persisted list, reorders it in memory and writes it
    back. Nothing is written when listing or reordering fails.
    """

    def __init__(self, repos: Optional[RepositoryListWriter] = None) -> None:
        if repos is None:
            from ritrepo.config.settings import settings
            from ritrepo.infrastructure.file_storage import LocalFileStorage
            from ritrepo.repositories.json_file import json_list_writer

            repos = json_list_writer(settings.home_dir, LocalFileStorage())
        self._repos = repos

    def list(self) -> RepositoryList:
        return self._repos.list()

    def set_priority(self, name: str, priority: int) -> RepositoryList:
        try:
            repos = self._repos.list()
        except RepositoryError:
            raise
        except Exception as exc:
            raise ListError(f"set priority: {exc}") from exc

        updated = reorder(repos, name, priority)
        applied = clamp_priority(priority, len(updated))
        if applied != priority:
            logger.warning(
                "Requested priority out of range, clamped",
                extra={"repo": name, "requested": priority, "applied": applied},
            )

        try:
            self._repos.write(updated)
        except RepositoryError:
            raise
        except Exception as exc:
            raise WriteError(f"set priority: {exc}") from exc

        logger.info("Repository priority updated", extra={"repo": name, "priority": applied})
        return updated
