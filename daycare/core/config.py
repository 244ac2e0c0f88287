"""
Configuration helpers for the daycare shell.

Settings are read from environment variables once and cached; command line
flags may override them when the shell starts.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

DEFAULT_DATA_FILE = "pokemons_data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: Path
    log_level: str
    rng_seed: Optional[int]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: Optional[int] = None) -> Optional[int]:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        data_file=Path(os.getenv("DAYCARE_DATA_FILE") or DEFAULT_DATA_FILE),
        log_level=(os.getenv("DAYCARE_LOG_LEVEL") or "WARNING").upper(),
        rng_seed=_int(os.getenv("DAYCARE_SEED")),
    )
