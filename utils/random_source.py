# utils/random_source.py

"""
Random sources used by the pet.

Every draw the pet makes (anxiety onset, anxious drift, anxious action
scaling) goes through a RandomSource handed to it at construction, so a
scripted source can replace the real generator without patching anything.
"""

from abc import ABC, abstractmethod
import random
from typing import Iterable, List, Optional


class RandomSource(ABC):
    """
    Interface for the two kinds of draws the pet needs.
    """

    @abstractmethod
    def next_unit_float(self) -> float:
        """Returns a float in [0, 1)."""

    @abstractmethod
    def next_bounded_int(self, bound: int) -> int:
        """Returns an int in [0, bound)."""


class SystemRandomSource(RandomSource):
    """
    Uniform generator backed by random.Random.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed (int, optional): Seed for reproducible runs.
        """
        self._random = random.Random(seed)

    def next_unit_float(self) -> float:
        return self._random.random()

    def next_bounded_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._random.randrange(bound)


class ScriptedRandomSource(RandomSource):
    """
    Deterministic source for tests and scripted scenarios.

    next_unit_float always returns the configured float. next_bounded_int
    walks the scripted ints round-robin and returns abs(value) % bound.
    """

    def __init__(self, unit_float: float = 0.5, ints: Iterable[int] = (0,)):
        self._unit_float = unit_float
        self._ints: List[int] = []
        self._index = 0
        self.set_ints(ints)

    def set_unit_float(self, value: float) -> None:
        """Sets the value returned by next_unit_float."""
        self._unit_float = value

    def set_ints(self, values: Iterable[int]) -> None:
        """
        Replaces the scripted int sequence and rewinds to its start.

        Raises:
            ValueError: If the sequence is empty.
        """
        values = list(values)
        if not values:
            raise ValueError("scripted int sequence cannot be empty")
        self._ints = values
        self._index = 0

    def next_unit_float(self) -> float:
        return self._unit_float

    def next_bounded_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        value = self._ints[self._index]
        self._index = (self._index + 1) % len(self._ints)
        return abs(value) % bound
