"""Shared fixtures for sector generator tests."""

import pytest


class ScriptedRNG:
    """Draw source that replays a fixed sequence of die faces.

    Counts every draw so tests can check how much of the stream a step
    consumed. Raises once the script runs out unless `cycle` is set.
    """

    def __init__(self, values, cycle=False):
        self.values = list(values)
        self.cycle = cycle
        self.consumed = 0

    def d6(self) -> int:
        if self.consumed >= len(self.values) and not self.cycle:
            raise IndexError(f"Dice script exhausted after {self.consumed} draws")
        value = self.values[self.consumed % len(self.values)]
        self.consumed += 1
        return value


@pytest.fixture
def scripted():
    """Factory for scripted draw sources."""
    return ScriptedRNG
