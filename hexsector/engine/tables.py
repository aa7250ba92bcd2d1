"""World creation tables.

Each function maps attributes that are already known to the next one,
throwing dice where the table calls for it. Rules follow the Traveller
System Reference Document world creation chapter:
https://www.traveller-srd.com/core-rules/world-creation/
"""

from bisect import bisect_right
from typing import Tuple

from ..utils.constants import (
    ATMOSPHERE_RANGE,
    GOVERNMENT_RANGE,
    HYDROGRAPHICS_RANGE,
    LAW_LEVEL_RANGE,
    POPULATION_RANGE,
    SIZE_RANGE,
    STARPORT_ROLL_RANGE,
    TECHNOLOGY_RANGE,
)
from ..utils.dice import DiceEngine

# Sorted (minimum 2d6 throw, starport class) pairs, searched with bisect
STARPORT_TABLE: Tuple[Tuple[int, str], ...] = (
    (2, "X"),
    (3, "E"),
    (4, "E"),
    (5, "D"),
    (6, "D"),
    (7, "C"),
    (8, "C"),
    (9, "B"),
    (10, "B"),
    (11, "A"),
)

# Atmospheres too thin, too exotic or too corrosive to hold much water
DRY_ATMOSPHERES = frozenset({0, 1, 10, 11, 12})

STARPORT_TECH_BONUS = {"A": 6, "B": 4, "C": 2}


def roll_size(dice: DiceEngine) -> int:
    return dice.clamp(dice.roll(2, -2), *SIZE_RANGE)


def roll_atmosphere(dice: DiceEngine, size: int) -> int:
    return dice.clamp(dice.roll(2, -7 + size), *ATMOSPHERE_RANGE)


def roll_hydrographics(dice: DiceEngine, size: int, atmosphere: int) -> int:
    """Hydrographics from size and atmosphere.

    Asteroids and airless size-1 worlds are dry without a throw, so no dice
    are consumed for them.
    """
    if size == 0 or (size == 1 and atmosphere == 0):
        hydrographics = 0
    elif atmosphere in DRY_ATMOSPHERES:
        hydrographics = dice.roll(2, -7 + size - 4)
    else:
        hydrographics = dice.roll(2, -7 + size)
    return dice.clamp(hydrographics, *HYDROGRAPHICS_RANGE)


def roll_population(dice: DiceEngine) -> int:
    return dice.clamp(dice.roll(2, -2), *POPULATION_RANGE)


def roll_government(dice: DiceEngine, population: int) -> int:
    return dice.clamp(dice.roll(2, -7 + population), *GOVERNMENT_RANGE)


def roll_law_level(dice: DiceEngine, government: int) -> int:
    return dice.clamp(dice.roll(2, -7 + government), *LAW_LEVEL_RANGE)


def starport_for_roll(roll: int, table: Tuple[Tuple[int, str], ...] = STARPORT_TABLE) -> str:
    """Look up the starport class for a 2d6 throw.

    Args:
        roll: Throw already clamped into the table's threshold range
        table: Sorted (threshold, class) pairs

    Returns:
        Starport class letter

    Raises:
        ValueError: If roll is below the lowest threshold
    """
    thresholds = [threshold for threshold, _ in table]
    index = bisect_right(thresholds, roll) - 1
    if index < 0:
        raise ValueError(f"Starport roll {roll} is below the table minimum {thresholds[0]}")
    return table[index][1]


def roll_starport(dice: DiceEngine, table: Tuple[Tuple[int, str], ...] = STARPORT_TABLE) -> str:
    # A natural 12 is clamped into the 11 bucket rather than a tier of its own
    return starport_for_roll(dice.clamp(dice.roll(2), *STARPORT_ROLL_RANGE), table)


def technology_bonus(
    starport: str,
    size: int,
    atmosphere: int,
    hydrographics: int,
    population: int,
    government: int,
) -> int:
    """Sum of the technology level modifiers for a world.

    Population 11-12 and government 14 are beyond what the generator rolls
    today; their rows are kept so the caps can be raised later.
    """
    bonus = STARPORT_TECH_BONUS.get(starport, 0)

    if size in (0, 1):
        bonus += 2
    elif 2 <= size <= 4:
        bonus += 1

    if atmosphere <= 3 or 10 <= atmosphere <= 15:
        bonus += 1

    if hydrographics in (0, 9):
        bonus += 1
    elif hydrographics == 10:
        bonus += 2

    if 1 <= population <= 5 or population == 9:
        bonus += 1
    elif population == 10:
        bonus += 2
    elif population == 11:
        bonus += 3
    elif population == 12:
        bonus += 4

    if government in (0, 5):
        bonus += 1
    elif government == 7:
        bonus += 2
    elif government in (13, 14):
        bonus -= 2

    return bonus


def roll_technology(
    dice: DiceEngine,
    starport: str,
    size: int,
    atmosphere: int,
    hydrographics: int,
    population: int,
    government: int,
) -> int:
    bonus = technology_bonus(starport, size, atmosphere, hydrographics, population, government)
    return dice.clamp(dice.roll(1) + bonus, *TECHNOLOGY_RANGE)
