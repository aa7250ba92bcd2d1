"""Sector generation pipeline."""

import logging
from typing import Iterator, Optional

from ..interface.renderer import GridRenderer
from ..models.config import SectorConfig
from ..models.sector import Sector, SectorMap
from ..utils.dice import DiceEngine
from ..utils.rng import DrawSource, SectorRNG
from .generator import StarSystemGenerator
from .tables import STARPORT_TABLE

logger = logging.getLogger(__name__)


def build_renderer(config: SectorConfig, source: Optional[DrawSource] = None) -> GridRenderer:
    """Wire one dice engine through the generator and the renderer.

    Args:
        config: Sector options
        source: Draw source; defaults to a SectorRNG seeded from config.seed

    Returns:
        Renderer ready to draw the configured grid
    """
    dice = DiceEngine(source if source is not None else SectorRNG(config.seed))
    generator = StarSystemGenerator(dice, STARPORT_TABLE)
    return GridRenderer(
        config.geometry(),
        dice,
        generator=generator,
        world_chance_modifier=config.world_chance_modifier,
    )


def stream_sector(
    config: SectorConfig, sector_map: SectorMap, source: Optional[DrawSource] = None
) -> Iterator[str]:
    """Yield grid lines as they are drawn, filling sector_map on the way.

    The map is only complete once the iterator is exhausted.
    """
    logger.info(
        f"Drawing {config.rows}x{config.cols} sector "
        f"(edges {config.horizontal_length}/{config.diagonal_length}, "
        f"world chance modifier {config.world_chance_modifier:+d})"
    )
    yield from build_renderer(config, source).iter_lines(sector_map)
    logger.info(f"Sector complete: {len(sector_map)} star systems")


def generate_sector(config: SectorConfig, source: Optional[DrawSource] = None) -> Sector:
    """Draw the grid and generate its star systems.

    Args:
        config: Sector options
        source: Optional draw source, mainly for scripted tests

    Returns:
        Sector holding the grid lines and the filled map
    """
    sector = Sector(config=config)
    sector.grid_lines = list(stream_sector(config, sector.systems, source))
    return sector
