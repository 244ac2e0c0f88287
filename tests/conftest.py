from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the daycare package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from daycare.core import config as core_config  # noqa: E402
from daycare.domain.creatures import Creature, Gender, Species  # noqa: E402


class ScriptedRandom:
    """Deterministic RandomSource: always the first name, genders from a list."""

    def __init__(self, pick_first: bool = True, bools=None):
        self.pick_first = pick_first
        self.bools = list(bools or [])

    def pick_one(self, first, second):
        return first if self.pick_first else second

    def pick_bool(self) -> bool:
        return self.bools.pop(0) if self.bools else True


@pytest.fixture()
def scripted_random():
    return ScriptedRandom()


@pytest.fixture()
def breeders():
    """Two level 5 Fire creatures of opposite gender."""
    return [
        Creature(name="Embera", species=Species.FIRE, gender=Gender.MALE, level=5, experience=400),
        Creature(name="Aquara", species=Species.FIRE, gender=Gender.FEMALE, level=5, experience=400),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def make_random():
    return ScriptedRandom
