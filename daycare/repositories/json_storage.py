"""
JSON persistence adapter for the creature collection.

The document is a JSON array with one object per creature, in collection
order. Species and gender are written as text labels through explicit lookup
tables, so the file format does not depend on the enum member names.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable, List

from daycare.domain.creatures import Creature, Gender, Species

logger = logging.getLogger(__name__)

SPECIES_TO_LABEL = {
    Species.FIRE: "Fire",
    Species.WATER: "Water",
    Species.PLANT: "Grass",
    Species.ELECTRIC: "Electric",
    Species.ROCK: "Rock",
    Species.PSYCHIC: "Psychic",
    Species.FLYING: "Flying",
    Species.BUG: "Bug",
    Species.NORMAL: "Normal",
    Species.FIGHTING: "Fighting",
    Species.POISON: "Poison",
    Species.GHOST: "Ghost",
    Species.DRAGON: "Dragon",
    Species.ICE: "Ice",
}
LABEL_TO_SPECIES = {label: species for species, label in SPECIES_TO_LABEL.items()}

GENDER_TO_LABEL = {Gender.MALE: "Male", Gender.FEMALE: "Female"}
LABEL_TO_GENDER = {label: gender for gender, label in GENDER_TO_LABEL.items()}

DEFAULT_SPECIES = Species.NORMAL
DEFAULT_GENDER = Gender.MALE


class StorageError(Exception):
    """Base class for persistence errors."""


class StorageIOError(StorageError):
    pass


class MalformedDataError(StorageError):
    pass


def to_document(creatures: Iterable[Creature]) -> List[dict]:
    return [
        {
            "name": c.name,
            "level": c.level,
            "type": SPECIES_TO_LABEL[c.species],
            "experience": c.experience,
            "gender": GENDER_TO_LABEL[c.gender],
        }
        for c in creatures
    ]


def _require(entry: dict, field: str, kind: type, position: int) -> Any:
    if field not in entry:
        raise MalformedDataError(f"entry {position}: missing field '{field}'")
    value = entry[field]
    # bool is an int subclass; reject it for numeric fields
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedDataError(f"entry {position}: field '{field}' must be {kind.__name__}")
    if kind is int and value < 0:
        raise MalformedDataError(f"entry {position}: field '{field}' must not be negative")
    return value


def from_document(data: Any) -> List[Creature]:
    """
    Build creatures from a decoded document.

    Unknown type labels fall back to Normal and unknown gender labels to Male.
    """
    if not isinstance(data, list):
        raise MalformedDataError("document must be a JSON array")
    creatures = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise MalformedDataError(f"entry {position}: expected an object")
        type_label = _require(entry, "type", str, position)
        gender_label = _require(entry, "gender", str, position)
        name = _require(entry, "name", str, position)
        if not name.strip():
            raise MalformedDataError(f"entry {position}: field 'name' must not be empty")
        species = LABEL_TO_SPECIES.get(type_label)
        if species is None:
            logger.debug("Unknown type label %r, using %s", type_label, DEFAULT_SPECIES.value)
            species = DEFAULT_SPECIES
        gender = LABEL_TO_GENDER.get(gender_label)
        if gender is None:
            logger.debug("Unknown gender label %r, using %s", gender_label, DEFAULT_GENDER.value)
            gender = DEFAULT_GENDER
        creatures.append(
            Creature(
                name=name,
                species=species,
                gender=gender,
                level=_require(entry, "level", int, position),
                experience=_require(entry, "experience", int, position),
            )
        )
    return creatures


def save(creatures: Iterable[Creature], destination: Path | str) -> None:
    """Overwrite destination with the whole collection."""
    path = Path(destination)
    try:
        payload = json.dumps(to_document(creatures), ensure_ascii=False, indent=2).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise StorageIOError(f"cannot encode collection for {path}: {exc}") from exc
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StorageIOError(f"cannot write {path}: {exc}") from exc
    logger.info("Data successfully saved to %s", path)


def load(source: Path | str) -> List[Creature]:
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise StorageIOError(f"cannot read {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedDataError(f"{path} is not valid JSON: {exc}") from exc
    creatures = from_document(data)
    logger.info("Loaded %d creatures from %s", len(creatures), path)
    return creatures
