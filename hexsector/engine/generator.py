"""Star system generation."""

import logging
from typing import Tuple

from ..models.star_system import StarSystemProfile
from ..utils.dice import DiceEngine
from .tables import (
    STARPORT_TABLE,
    roll_atmosphere,
    roll_government,
    roll_hydrographics,
    roll_law_level,
    roll_population,
    roll_size,
    roll_starport,
    roll_technology,
)

logger = logging.getLogger(__name__)


class StarSystemGenerator:
    """Builds complete world profiles from the shared dice stream."""

    def __init__(self, dice: DiceEngine, starport_table: Tuple[Tuple[int, str], ...] = STARPORT_TABLE):
        """Initialize generator.

        Args:
            dice: Dice engine shared with the rest of the run
            starport_table: Sorted (threshold, class) pairs for starport throws
        """
        self.dice = dice
        self.starport_table = starport_table

    def generate(self) -> StarSystemProfile:
        """Generate one star system.

        Attributes are rolled in dependency order (size, atmosphere,
        hydrographics, population, government, law level, starport,
        technology). The order fixes which draws feed which attribute, so
        changing it changes every seeded sector.

        Returns:
            A profile with every attribute clamped into range
        """
        dice = self.dice
        size = roll_size(dice)
        atmosphere = roll_atmosphere(dice, size)
        hydrographics = roll_hydrographics(dice, size, atmosphere)
        population = roll_population(dice)
        government = roll_government(dice, population)
        law_level = roll_law_level(dice, government)
        starport = roll_starport(dice, self.starport_table)
        technology = roll_technology(
            dice, starport, size, atmosphere, hydrographics, population, government
        )

        profile = StarSystemProfile(
            size=size,
            atmosphere=atmosphere,
            hydrographics=hydrographics,
            population=population,
            government=government,
            law_level=law_level,
            starport=starport,
            technology=technology,
        )
        logger.debug(f"Generated star system: {profile}")
        return profile
