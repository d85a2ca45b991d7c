"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str
    database_echo: bool = False


def get_settings() -> Settings:
    """Build settings from ``CATALOG_*`` environment variables.

    Read on every call so tests can point the CLI at a temporary database.
    """
    default_url = f"sqlite:///{_DATA_DIR / 'catalog.db'}"
    return Settings(
        database_url=os.getenv("CATALOG_DATABASE_URL", default_url),
        database_echo=os.getenv("CATALOG_DATABASE_ECHO", "").lower() in _TRUTHY,
    )
