"""Creature model and the rules for leveling and breeding."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

XP_PER_LEVEL = 100
BREEDING_MIN_LEVEL = 5


class Species(Enum):
    FIRE = "Fire"
    WATER = "Water"
    PLANT = "Plant"
    ELECTRIC = "Electric"
    ROCK = "Rock"
    PSYCHIC = "Psychic"
    FLYING = "Flying"
    BUG = "Bug"
    NORMAL = "Normal"
    FIGHTING = "Fighting"
    POISON = "Poison"
    GHOST = "Ghost"
    DRAGON = "Dragon"
    ICE = "Ice"


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass
class Creature:
    name: str
    species: Species
    gender: Gender
    level: int = 1
    experience: int = 0


@dataclass(frozen=True)
class LevelUp:
    name: str
    old_level: int
    new_level: int


def create_creature(name: str, species: Species, gender: Gender) -> Creature:
    """Return a fresh level 1 creature with no experience."""
    name = (name or "").strip()
    if not name:
        raise ValueError("creature name must not be empty")
    return Creature(name=name, species=species, gender=gender)


def level_for_experience(experience: int) -> int:
    return 1 + experience // XP_PER_LEVEL


def grant_experience(creature: Creature, amount: int) -> Optional[LevelUp]:
    """
    Add experience and recompute the level.

    Returns a LevelUp event when the creature gained at least one level.
    """
    if amount < 0:
        raise ValueError("experience amount must not be negative")
    old_level = creature.level
    creature.experience += amount
    creature.level = max(old_level, level_for_experience(creature.experience))
    if creature.level > old_level:
        return LevelUp(creature.name, old_level, creature.level)
    return None


def display_summary(creature: Creature) -> str:
    return (
        f"🔍 {creature.name} (Lv. {creature.level}) - Type: {creature.species.value}\n"
        f"   XP: {creature.experience % XP_PER_LEVEL}/{XP_PER_LEVEL} - Gender: {creature.gender.value}"
    )


def can_pair(a: Creature, b: Creature) -> bool:
    """True when both creatures share a species, differ in gender and are old enough."""
    return (
        a.species == b.species
        and a.gender != b.gender
        and a.level >= BREEDING_MIN_LEVEL
        and b.level >= BREEDING_MIN_LEVEL
    )


def species_from_choice(choice: int) -> Optional[Species]:
    """Map a 1-based menu choice (1-14) to a species, None when out of range."""
    members = list(Species)
    if 1 <= choice <= len(members):
        return members[choice - 1]
    return None


def gender_from_choice(choice: int) -> Optional[Gender]:
    members = list(Gender)
    if 1 <= choice <= len(members):
        return members[choice - 1]
    return None
