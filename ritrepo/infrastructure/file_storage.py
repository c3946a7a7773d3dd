from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

PathLike = Union[str, Path]


class FileStorage(Protocol):
    """Byte-level access to a path: read, write and existence probe."""

    def read(self, path: PathLike) -> bytes: ...

    def write(self, path: PathLike, content: bytes) -> None: ...

    def exists(self, path: PathLike) -> bool: ...


class LocalFileStorage:
    """:class:`FileStorage` backed by the local filesystem.

    ``write`` creates missing parent directories; it never removes files.
    """

    def read(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write(self, path: PathLike, content: bytes) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()


class InMemoryStorage:
    """Dict-backed :class:`FileStorage`, keyed by ``str(path)``."""

    def __init__(self, files: Optional[Mapping[PathLike, bytes]] = None) -> None:
        self._files: Dict[str, bytes] = {str(k): v for k, v in (files or {}).items()}

    def read(self, path: PathLike) -> bytes:
        try:
            return self._files[str(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write(self, path: PathLike, content: bytes) -> None:
        self._files[str(path)] = bytes(content)

    def exists(self, path: PathLike) -> bool:
        return str(path) in self._files
