"""Dice throws and range clamping."""

from .rng import DrawSource


class DiceEngine:
    """Throws six-sided dice from a single shared draw source.

    Every roll consumes draws in call order, so the engine must be shared
    (not copied) by everything taking part in one sector run.
    """

    def __init__(self, source: DrawSource):
        self.source = source

    def roll(self, count: int, modifier: int = 0) -> int:
        """Throw `count` d6 and add `modifier`.

        The result is not bounded: it can be negative or exceed 6 * count.

        Args:
            count: Number of dice to throw
            modifier: Value added to the sum

        Returns:
            Sum of the dice plus the modifier

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"Invalid dice count: {count} (must be >= 0)")
        total = 0
        for _ in range(count):
            total += self.source.d6()
        return total + modifier

    @staticmethod
    def clamp(value: int, minimum: int, maximum: int) -> int:
        """Restrict value to [minimum, maximum].

        Raises:
            ValueError: If minimum > maximum
        """
        if minimum > maximum:
            raise ValueError(f"min ({minimum}) > max ({maximum})")
        if value < minimum:
            return minimum
        if value > maximum:
            return maximum
        return value
