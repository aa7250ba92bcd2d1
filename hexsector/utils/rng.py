"""Seedable RNG wrapper for deterministic sector generation."""

import random
from typing import Protocol


class DrawSource(Protocol):
    """Anything that can hand out uniform integers in 1..6."""

    def d6(self) -> int: ...


class SectorRNG:
    """Wrapper around Python's random.Random used as the sector's draw stream.

    All randomness in a run goes through one instance so the same seed
    always produces the same grid and the same star systems.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic output, or None to seed
                from the operating system
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def d6(self) -> int:
        """Return one six-sided die throw.

        Returns:
            Random integer between 1 and 6, inclusive
        """
        return self.rng.randint(1, 6)
