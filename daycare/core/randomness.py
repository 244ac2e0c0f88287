"""Source of randomness used when a pair of creatures produces an egg."""

from __future__ import annotations

import random
from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def pick_one(self, first: T, second: T) -> T:
        ...

    def pick_bool(self) -> bool:
        ...


class SystemRandomSource:
    """Fair coin flips backed by random.Random; pass a seed for reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def pick_bool(self) -> bool:
        return self._rng.random() < 0.5

    def pick_one(self, first: T, second: T) -> T:
        return first if self.pick_bool() else second
