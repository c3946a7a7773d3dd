from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ..value_objects.ids import RepoName


class Repository(BaseModel):
    name: RepoName = Field(..., min_length=1, description="Unique repository name")
    version: str = Field(default="", description="Repository version, opaque to this package")
    url: str = Field(default="", description="Remote location, empty for local repositories")
    # Stored ranks may be negative or sparse until a priority change renumbers them.
    priority: int = Field(default=0, strict=True, description="Lookup precedence rank")
    is_local: bool = Field(
        default=False, alias="isLocal", strict=True, description="Local repository flag"
    )
    provider: str = Field(default="", description="Provider label, e.g. 'Local' or 'Github'")

    # Unknown persisted keys are kept so they survive a rewrite of the file.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @field_validator("version", "url", "provider", "is_local", mode="before")
    @classmethod
    def _null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return v

    def with_priority(self, priority: int) -> "Repository":
        return self.model_copy(update={"priority": priority})


class RepositoryList(RootModel[list[Repository]]):
    """Ordered repository collection as stored on disk.

    Iteration follows storage order. ``priority`` is an independent rank, see
    :meth:`by_priority` for precedence order.
    """

    root: list[Repository] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> "RepositoryList":
        seen: set[str] = set()
        for repo in self.root:
            if repo.name in seen:
                raise ValueError(f"duplicate repository name: {repo.name}")
            seen.add(repo.name)
        return self

    def __iter__(self) -> Iterator[Repository]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Repository:
        return self.root[index]

    def get(self, name: str) -> Optional[Repository]:
        for repo in self.root:
            if repo.name == name:
                return repo
        return None

    def names(self) -> list[str]:
        return [repo.name for repo in self.root]

    def by_priority(self) -> list[Repository]:
        """Entries sorted by rank; ties keep their storage order."""
        return sorted(self.root, key=lambda repo: repo.priority)
