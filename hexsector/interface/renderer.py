"""Hex grid renderer.

This module walks the sector row by row through a small state machine,
producing one text line per step. Star checks happen on two kinds of line:
the middle of the high hexes and the bottom edge (the middle of the low
hexes). Each successful check generates a star system and reports where it
belongs; the caller decides where to store it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..engine.generator import StarSystemGenerator
from ..models.config import GridGeometry
from ..models.sector import SectorMap
from ..models.star_system import HexCoordinate, StarSystemProfile
from ..utils.constants import WORLD_CHANCE_THRESHOLD
from ..utils.dice import DiceEngine
from . import hexgrid

logger = logging.getLogger(__name__)

Placement = Tuple[HexCoordinate, StarSystemProfile]


class Phase(Enum):
    """Which part of a hex row is being drawn."""

    DIAGONALS_UPPER = "diagonals_upper"
    MIDDLES = "middles"
    DIAGONALS_LOWER = "diagonals_lower"
    BOTTOM_EDGE = "bottom_edge"


@dataclass(frozen=True)
class DrawState:
    phase: Phase
    diag_row: int = 0  # 0-based; only meaningful for the diagonal phases


INITIAL_STATE = DrawState(Phase.DIAGONALS_UPPER, 0)


@dataclass(frozen=True)
class RenderContext:
    """Everything a render step needs besides the state and row."""

    geometry: GridGeometry
    dice: DiceEngine
    generator: StarSystemGenerator
    world_chance_modifier: int = 0


@dataclass(frozen=True)
class RenderStep:
    """Output of one state machine step."""

    line: str
    next_state: DrawState
    placements: Tuple[Placement, ...] = ()


def _next_diagonal(state: DrawState, geometry: GridGeometry, done: Phase) -> DrawState:
    # The last slanted text row of each half is drawn by the middle or
    # bottom edge line, hence D - 2 rather than D - 1
    if state.diag_row >= geometry.diagonal - 2:
        return DrawState(done)
    return DrawState(state.phase, state.diag_row + 1)


def _check_for_stars(
    context: RenderContext, row: int, col_offset: int
) -> Tuple[List[bool], Tuple[Placement, ...]]:
    """Roll the star check for every hex pair along one line.

    Systems are generated as soon as their check succeeds, so draws for
    the check and the profile interleave from left to right.

    Args:
        context: Render context holding the shared dice
        row: Sector row being drawn
        col_offset: 1 for the high hexes, 2 for the low hexes

    Returns:
        Tuple of (star flag per pair, placements for the successful checks)
    """
    flags: List[bool] = []
    placements: List[Placement] = []
    for pair in range(context.geometry.pairs):
        throw = context.dice.roll(2) + context.world_chance_modifier
        if throw < WORLD_CHANCE_THRESHOLD:
            flags.append(False)
            continue
        flags.append(True)
        coord = HexCoordinate(row, 2 * pair + col_offset)
        placements.append((coord, context.generator.generate()))
    return flags, tuple(placements)


def advance(state: DrawState, row: int, context: RenderContext) -> RenderStep:
    """Draw one line of the grid and move the state machine on.

    Nothing is stored here: star systems found on the line come back as
    placements. Row `geometry.rows + 1` is the closing row that draws the
    bottoms of the last real row; it gets no label and no star checks.

    Args:
        state: Current draw state
        row: 1-based sector row, up to rows + 1
        context: Geometry, dice and generator for this run

    Returns:
        RenderStep with the line, the next state and any placements
    """
    geometry = context.geometry
    is_first_row = row == 1
    is_closing_row = row > geometry.rows

    if state.phase is Phase.DIAGONALS_UPPER:
        line = hexgrid.upper_diagonal(
            geometry, state.diag_row, close_previous=not is_first_row, lead=not is_closing_row
        )
        return RenderStep(line, _next_diagonal(state, geometry, Phase.MIDDLES))

    if state.phase is Phase.MIDDLES:
        next_state = DrawState(Phase.DIAGONALS_LOWER, 0)
        if is_closing_row:
            return RenderStep(hexgrid.closing_middle(geometry), next_state)
        stars, placements = _check_for_stars(context, row, col_offset=1)
        line = hexgrid.middle(geometry, row, stars, close_previous=not is_first_row)
        return RenderStep(line, next_state, placements)

    if state.phase is Phase.DIAGONALS_LOWER:
        line = "" if is_closing_row else hexgrid.lower_diagonal(geometry, state.diag_row)
        return RenderStep(line, _next_diagonal(state, geometry, Phase.BOTTOM_EDGE))

    if state.phase is Phase.BOTTOM_EDGE:
        if is_closing_row:
            return RenderStep("", INITIAL_STATE)
        stars, placements = _check_for_stars(context, row, col_offset=2)
        return RenderStep(hexgrid.bottom_edge(geometry, stars), INITIAL_STATE, placements)

    raise ValueError(f"Unknown draw phase: {state.phase}")


class GridRenderer:
    """Renders a sector's hex grid and fills its map with star systems."""

    def __init__(
        self,
        geometry: GridGeometry,
        dice: DiceEngine,
        generator: Optional[StarSystemGenerator] = None,
        world_chance_modifier: int = 0,
    ):
        """Initialize renderer.

        Args:
            geometry: Grid dimensions
            dice: Dice engine shared with the generator
            generator: Star system generator (defaults to one on `dice`)
            world_chance_modifier: Added to every 2d6 star check
        """
        self.context = RenderContext(
            geometry=geometry,
            dice=dice,
            generator=generator or StarSystemGenerator(dice),
            world_chance_modifier=world_chance_modifier,
        )

    def iter_lines(self, sector_map: SectorMap) -> Iterator[str]:
        """Yield grid lines in output order, storing systems as they appear.

        Yields the column header and the top edge, then 2 * D lines for each
        of the rows + 1 row blocks.

        Args:
            sector_map: Map receiving every placed star system
        """
        geometry = self.context.geometry
        yield hexgrid.column_header(geometry)
        yield hexgrid.top_edge(geometry)

        state = INITIAL_STATE
        for row in range(1, geometry.rows + 2):
            for _ in range(2 * geometry.diagonal):
                step = advance(state, row, self.context)
                for coord, profile in step.placements:
                    sector_map.place(coord, profile)
                    logger.debug(f"Placed star system at row {coord.row}, col {coord.col}")
                state = step.next_state
                yield step.line

    def render(self, sector_map: SectorMap) -> List[str]:
        """Render the whole grid.

        Returns:
            All grid lines, header first
        """
        return list(self.iter_lines(sector_map))
