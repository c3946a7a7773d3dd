"""Application settings for the repository manager.

This module centralises where the CLI keeps its state on disk and how it logs.
Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a Pydantic settings object.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_HOME = Path.home() / ".rit"
REPOS_DIR_NAME = "repos"
REPOS_FILE_NAME = "repositories.json"
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    home_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    model_config = ConfigDict(frozen=True)

    @property
    def repos_file(self) -> Path:
        return self.home_dir / REPOS_DIR_NAME / REPOS_FILE_NAME

    @property
    def resolved_log_file(self) -> Path:
        return self.log_file or self.home_dir / "logs" / "ritrepo.log"


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    home = os.getenv("RIT_HOME")
    home_dir = Path(home).expanduser() if home else DEFAULT_HOME

    log_level = os.getenv("RIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"RIT_LOG_LEVEL must be a logging level name, got {log_level!r}")

    log_file = os.getenv("RIT_LOG_FILE")

    return Settings(
        home_dir=home_dir,
        log_level=log_level,
        log_file=Path(log_file).expanduser() if log_file else None,
    )


# Public settings instance
settings = _build_settings()
