#!/usr/bin/env python3
"""
Start the interactive breeding menu.

Usage:
  daycare [--data-file pokemons_data.json] [--seed 42] [--log-level INFO]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from daycare.core.config import get_settings
from daycare.core.logs import configure_logging
from daycare.core.randomness import SystemRandomSource
from daycare.repositories import json_storage
from daycare.services.breeding_service import BreedingService
from daycare.shell import MenuShell

logger = logging.getLogger(__name__)


def build_service(data_file: Path, seed: Optional[int] = None) -> BreedingService:
    """Load the collection from data_file; a missing file starts an empty collection."""
    creatures = []
    if data_file.exists():
        creatures = json_storage.load(data_file)
    else:
        logger.warning("Data file %s not found, starting with an empty collection", data_file)
    return BreedingService(creatures, rng=SystemRandomSource(seed))


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Track, train and breed Pokémon from a text menu")
    ap.add_argument("--data-file", default=str(settings.data_file), help="JSON file holding the collection")
    ap.add_argument("--seed", type=int, default=settings.rng_seed, help="Seed for reproducible breeding")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (default: WARNING)")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)
    data_file = Path(args.data_file)
    try:
        service = build_service(data_file, args.seed)
    except json_storage.StorageError as exc:
        sys.stderr.write(f"Error loading {data_file}: {exc}\n")
        raise SystemExit(1)

    MenuShell(service, data_file).run()


if __name__ == "__main__":
    main()
