"""Library and command-line settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

ENV_PREFIX = "PGNKIT_"


def _default_pgn_dir() -> Path:
    return Path.home() / "pgns"


@dataclass
class LibrarySettings:
    """All user-configurable settings."""

    # Library
    pgn_dir: Path = field(default_factory=_default_pgn_dir)
    page_size: int = 6
    encoding: str = "utf-8"

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"Page size must be positive: {self.page_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LibrarySettings:
        """Build settings from ``PGNKIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        pgn_dir = env.get(f"{ENV_PREFIX}PGN_DIR")
        if pgn_dir:
            settings.pgn_dir = Path(pgn_dir).expanduser()

        page_size = env.get(f"{ENV_PREFIX}PAGE_SIZE")
        if page_size:
            try:
                settings.page_size = int(page_size)
            except ValueError:
                raise ValueError(f"Invalid page size: {page_size!r}") from None
            if settings.page_size <= 0:
                raise ValueError(f"Page size must be positive: {settings.page_size}")

        encoding = env.get(f"{ENV_PREFIX}ENCODING")
        if encoding:
            settings.encoding = encoding

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()

        return settings
