"""
Collection use cases: add, train, breed and sort the creatures of one session.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from daycare.core.randomness import RandomSource, SystemRandomSource
from daycare.domain.creatures import (
    Creature,
    Gender,
    LevelUp,
    can_pair,
    create_creature,
    grant_experience,
)

logger = logging.getLogger(__name__)


class BreedingError(Exception):
    """Base class for collection-related exceptions."""


class IndexOutOfRangeError(BreedingError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid Pokémon index {index} (collection has {size})")
        self.index = index
        self.size = size


class IncompatiblePairError(BreedingError):
    def __init__(self, first: Creature, second: Creature):
        super().__init__(f"{first.name} and {second.name} cannot breed together.")
        self.first = first
        self.second = second


class BreedingService:
    """Owns the ordered collection and the per-pair egg counter."""

    def __init__(self, creatures: Optional[Iterable[Creature]] = None, rng: Optional[RandomSource] = None):
        self.creatures: List[Creature] = list(creatures or [])
        # "<first>_<second>" -> eggs produced by that ordered pair; not persisted
        self.breeding_counter: dict[str, int] = {}
        self.rng: RandomSource = rng or SystemRandomSource()

    # -------------------------------------- helpers --------------------------------------
    def _get(self, index: int) -> Creature:
        if not 0 <= index < len(self.creatures):
            raise IndexOutOfRangeError(index, len(self.creatures))
        return self.creatures[index]

    @staticmethod
    def counter_key(first: Creature, second: Creature) -> str:
        return f"{first.name}_{second.name}"

    # -------------------------------------- use cases --------------------------------------
    def add(self, creature: Creature) -> None:
        self.creatures.append(creature)
        logger.info("%s has joined the breeding", creature.name)

    def list(self) -> Tuple[Creature, ...]:
        return tuple(self.creatures)

    def train_all(self, amount: int) -> List[LevelUp]:
        """Grant the same amount of experience to every creature, in collection order."""
        events = []
        for creature in self.creatures:
            event = grant_experience(creature, amount)
            if event:
                events.append(event)
        logger.info("Trained %d creatures with %d XP", len(self.creatures), amount)
        return events

    def train_one(self, index: int, amount: int) -> Optional[LevelUp]:
        creature = self._get(index)
        logger.info("%s gains %d XP", creature.name, amount)
        return grant_experience(creature, amount)

    def pair(self, index_a: int, index_b: int) -> Creature:
        """
        Breed the creatures at two positions and append the baby.

        The baby inherits the first parent's species; its gender and the parent
        it is named after are picked at random. Both candidate names carry the
        same counter value for the ordered pair.
        """
        first = self._get(index_a)
        second = self._get(index_b)
        if not can_pair(first, second):
            raise IncompatiblePairError(first, second)

        key = self.counter_key(first, second)
        count = self.breeding_counter.get(key, 0) + 1
        self.breeding_counter[key] = count

        name = self.rng.pick_one(f"Baby {first.name} #{count}", f"Baby {second.name} #{count}")
        gender = Gender.MALE if self.rng.pick_bool() else Gender.FEMALE
        baby = create_creature(name, first.species, gender)
        self.creatures.append(baby)
        logger.info("%s and %s produced %s", first.name, second.name, baby.name)
        return baby

    def sort_by_level(self) -> None:
        self.creatures.sort(key=lambda c: c.level, reverse=True)

    def sort_by_type(self) -> None:
        self.creatures.sort(key=lambda c: c.species.value)
