"""
Interactive text menu over a BreedingService.

Every command that completes ends with a save of the whole collection,
including listing and quitting. A failed save is reported and the loop goes on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from daycare.domain.creatures import (
    Gender,
    Species,
    create_creature,
    display_summary,
    gender_from_choice,
    species_from_choice,
)
from daycare.repositories import json_storage
from daycare.services.breeding_service import BreedingError, BreedingService

MENU = """
===== BREEDING MENU =====
1. Display all Pokémon
2. Add a new Pokémon
3. Train all Pokémon
4. Train a single Pokémon
5. Try breeding
6. Sort by level
7. Sort by type
0. Quit"""

TYPE_CHOICES = """Available types:
1. Fire    2. Water      3. Plant    4. Electric
5. Rock   6. Psychic   7. Flying    8. Bug
9. Normal 10. Fighting 11. Poison   12. Ghost
13. Dragon 14. Ice"""


class ParseFailure(ValueError):
    """Raised when a numeric field could not be read; aborts the current command."""


def parse_unsigned(raw: str) -> int:
    text = (raw or "").strip()
    if not text.isdecimal():
        raise ParseFailure(text)
    try:
        return int(text)
    except ValueError as exc:
        # digit strings past the interpreter's int conversion limit
        raise ParseFailure(text) from exc


class MenuShell:
    def __init__(
        self,
        service: BreedingService,
        data_file: Path | str,
        reader: Optional[Callable[[str], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self.data_file = Path(data_file)
        self.reader = reader or input
        self.writer = writer or print
        self.commands: dict[str, Callable[[], bool]] = {
            "1": self.show_all,
            "2": self.add_creature,
            "3": self.train_all,
            "4": self.train_one,
            "5": self.breed,
            "6": self.sort_by_level,
            "7": self.sort_by_type,
            "8": self.save_only,
            "0": self.quit,
        }

    # -------------------------------------- helpers --------------------------------------
    def ask(self, prompt: str) -> str:
        return self.reader(prompt).strip()

    def save(self) -> bool:
        try:
            json_storage.save(self.service.creatures, self.data_file)
        except json_storage.StorageError as exc:
            self.writer(f"Error saving data: {exc}")
            return False
        self.writer(f"Data successfully saved to {self.data_file}")
        return True

    def print_collection(self) -> None:
        creatures = self.service.list()
        self.writer(f"\n===== POKEMON LIST ({len(creatures)}) =====")
        for position, creature in enumerate(creatures, start=1):
            self.writer(f"#{position}")
            self.writer(display_summary(creature))
            self.writer("")

    def report_level_up(self, event) -> None:
        if event:
            self.writer(f"{event.name} leveled up to level {event.new_level}!")

    # -------------------------------------- commands --------------------------------------
    # Each command returns False only when the loop must stop.
    def show_all(self) -> bool:
        self.print_collection()
        self.save()
        return True

    def add_creature(self) -> bool:
        self.writer("\n--- Add a Pokémon ---")
        name = self.ask("Name: ")
        if not name:
            self.writer("Name cannot be empty")
            return True

        self.writer(TYPE_CHOICES)
        species: Optional[Species] = None
        try:
            species = species_from_choice(parse_unsigned(self.ask("Choose the type (1-14): ")))
        except ParseFailure:
            pass
        if species is None:
            self.writer("Invalid type, using Normal type by default")
            species = Species.NORMAL

        gender: Optional[Gender] = None
        try:
            gender = gender_from_choice(parse_unsigned(self.ask("Gender (1: Male, 2: Female): ")))
        except ParseFailure:
            pass
        if gender is None:
            self.writer("Invalid gender, using Male by default")
            gender = Gender.MALE

        creature = create_creature(name, species, gender)
        self.service.add(creature)
        self.writer(f"➕ {creature.name} has joined the breeding!")
        self.save()
        return True

    def train_all(self) -> bool:
        try:
            amount = parse_unsigned(self.ask("Amount of XP to gain: "))
        except ParseFailure:
            self.writer("Invalid amount of XP")
            return True
        self.writer("\n===== TRAINING SESSION =====")
        self.writer(f"All Pokémon gain {amount} XP!")
        for event in self.service.train_all(amount):
            self.report_level_up(event)
        self.save()
        return True

    def train_one(self) -> bool:
        self.print_collection()
        try:
            index = parse_unsigned(self.ask("Pokémon index: "))
            amount = parse_unsigned(self.ask("Amount of XP to gain: "))
        except ParseFailure:
            self.writer("Invalid indices")
            return True
        try:
            event = self.service.train_one(index - 1, amount)
        except BreedingError as exc:
            self.writer(f"Error: {exc}")
            return True
        self.writer("\n===== INDIVIDUAL TRAINING =====")
        self.writer(f"{self.service.creatures[index - 1].name} gains {amount} XP!")
        self.report_level_up(event)
        self.save()
        return True

    def breed(self) -> bool:
        self.print_collection()
        try:
            first = parse_unsigned(self.ask("First Pokémon index: "))
            second = parse_unsigned(self.ask("Second Pokémon index: "))
        except ParseFailure:
            self.writer("Invalid indices")
            return True
        try:
            baby = self.service.pair(first - 1, second - 1)
        except BreedingError as exc:
            self.writer(f"Error: {exc}")
            return True
        self.writer("\n🎉 An egg has hatched! A new Pokémon has been born!")
        self.writer(display_summary(baby))
        self.save()
        return True

    def sort_by_level(self) -> bool:
        self.service.sort_by_level()
        self.writer("Pokémon sorted by level (descending)")
        self.save()
        return True

    def sort_by_type(self) -> bool:
        self.service.sort_by_type()
        self.writer("Pokémon sorted by type")
        self.save()
        return True

    def save_only(self) -> bool:
        self.save()
        return True

    def quit(self) -> bool:
        self.writer("Goodbye!")
        self.save()
        return False

    # -------------------------------------- loop --------------------------------------
    def handle(self, choice: str) -> bool:
        command = self.commands.get((choice or "").strip())
        if command is None:
            self.writer("Invalid option")
            return True
        return command()

    def run(self) -> None:
        while True:
            self.writer(MENU)
            try:
                keep_going = self.handle(self.ask("Your choice: "))
            except EOFError:
                # input closed: behave like "0"
                keep_going = self.quit()
            if not keep_going:
                break
