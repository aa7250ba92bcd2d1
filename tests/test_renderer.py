"""Tests for the hex grid renderer state machine."""

import pytest

from hexsector.engine import StarSystemGenerator
from hexsector.engine.sector_generator import generate_sector
from hexsector.interface.listing import listing_lines
from hexsector.interface.renderer import (
    INITIAL_STATE,
    DrawState,
    GridRenderer,
    Phase,
    RenderContext,
    advance,
)
from hexsector.models import (
    AxisStyle,
    GridGeometry,
    HexCoordinate,
    SectorConfig,
    SectorMap,
    StarSystemProfile,
)
from hexsector.utils import DiceEngine

EMPTY_TWO_BY_FOUR = [
    "       01     02     03     04",
    "      _____         _____",
    "     /     \\       /     \\",
    "01  /       \\_____/       \\_____",
    "    \\       /     \\       /     \\",
    "     \\_____/       \\_____/       \\",
    "     /     \\       /     \\       /",
    "02  /       \\_____/       \\_____/",
    "    \\       /     \\       /     \\",
    "     \\_____/       \\_____/       \\",
    "           \\       /     \\       /",
    "            \\_____/       \\_____/",
    "",
    "",
]

# All-ones draws make the first system an asteroid: X-000000-6 after 13 draws
ASTEROID_DRAWS = [1] * 13
ASTEROID = StarSystemProfile(0, 0, 0, 0, 0, 0, "X", 6)


def _context(geometry, source, modifier=0):
    dice = DiceEngine(source)
    return RenderContext(geometry, dice, StarSystemGenerator(dice), modifier)


class TestGridRenderer:
    """Test full grid rendering."""

    def test_empty_grid(self, scripted):
        """Test the exact drawing of a 2x4 grid with no stars."""
        source = scripted([1], cycle=True)
        renderer = GridRenderer(GridGeometry(2, 4, 5, 2), DiceEngine(source))
        sector_map = SectorMap()

        assert renderer.render(sector_map) == EMPTY_TWO_BY_FOUR
        assert len(sector_map) == 0
        # One middle and one bottom check per pair and row, two dice each
        assert source.consumed == 2 * 2 * 2 * 2

    def test_star_in_middle(self, scripted):
        """Test a middle check places a system at the high hex."""
        source = scripted([6, 6] + ASTEROID_DRAWS + [1, 1])
        renderer = GridRenderer(GridGeometry(1, 2, 5, 2), DiceEngine(source))
        sector_map = SectorMap()

        lines = renderer.render(sector_map)

        assert lines == [
            "       01     02",
            "      _____",
            "     /     \\",
            "01  /   o   \\_____",
            "    \\       /     \\",
            "     \\_____/       \\",
            "           \\       /",
            "            \\_____/",
            "",
            "",
        ]
        assert sector_map.get(HexCoordinate(1, 1)) == ASTEROID
        assert len(sector_map) == 1
        assert source.consumed == 17

    def test_star_in_bottom_edge(self, scripted):
        """Test a bottom edge check places a system at the low hex."""
        source = scripted([1, 1, 6, 6] + ASTEROID_DRAWS)
        renderer = GridRenderer(GridGeometry(1, 2, 5, 2), DiceEngine(source))
        sector_map = SectorMap()

        lines = renderer.render(sector_map)

        assert lines[5] == "     \\_____/   o   \\"
        assert list(sector_map) == [HexCoordinate(1, 2)]

    def test_world_chance_modifier(self, scripted):
        """Test the modifier shifts every star check."""
        source = scripted([1], cycle=True)
        renderer = GridRenderer(GridGeometry(1, 2, 5, 2), DiceEngine(source), world_chance_modifier=2)
        sector_map = SectorMap()
        renderer.render(sector_map)

        # 2 + 2 = 4 passes the check in both the middle and the bottom edge
        assert sorted((c.row, c.col) for c in sector_map) == [(1, 1), (1, 2)]

    def test_no_stars_means_empty_listing(self, scripted):
        """Test a 1x2 sector with all-ones draws lists nothing."""
        sector = generate_sector(SectorConfig(rows=1, cols=2), source=scripted([1], cycle=True))
        assert len(sector.systems) == 0
        assert listing_lines(sector.systems, AxisStyle.XY) == []

    @pytest.mark.parametrize(
        "rows,cols,horizontal,diagonal",
        [(1, 2, 5, 2), (10, 8, 5, 2), (3, 5, 4, 3), (4, 6, 7, 4), (2, 1, 2, 2)],
    )
    def test_line_count(self, rows, cols, horizontal, diagonal):
        """Test header + top edge + (rows + 1) * 2D lines."""
        config = SectorConfig(
            rows=rows, cols=cols, horizontal_length=horizontal, diagonal_length=diagonal, seed=5
        )
        sector = generate_sector(config)
        assert len(sector.grid_lines) == 2 + (rows + 1) * 2 * diagonal

    def test_lines_use_grid_characters_only(self):
        """Test output is made of blanks, edges, digits and markers."""
        allowed = set(" _/\\0123456789oO")
        for diagonal in (2, 3):
            config = SectorConfig(rows=4, cols=6, diagonal_length=diagonal, seed=9)
            for line in generate_sector(config).grid_lines:
                assert set(line) <= allowed

    def test_big_hexes_use_capital_marker(self):
        """Test D > 2 draws O for every star."""
        config = SectorConfig(rows=3, cols=4, diagonal_length=3, world_chance_modifier=10, seed=1)
        text = "\n".join(generate_sector(config).grid_lines)
        assert "O" in text
        assert "o" not in text

    def test_entries_inside_grid(self):
        """Test every placed system sits on a drawn hex."""
        for seed in range(20):
            config = SectorConfig(rows=5, cols=7, world_chance_modifier=3, seed=seed)
            sector = generate_sector(config)
            for coord in sector.systems:
                assert 1 <= coord.row <= 5
                # Column 7 is the dropped half pair
                assert 1 <= coord.col <= 6

    def test_full_density_fills_every_hex(self):
        """Test a huge modifier places a system in every drawn hex."""
        config = SectorConfig(rows=3, cols=4, world_chance_modifier=12, seed=0)
        sector = generate_sector(config)
        assert len(sector.systems) == 3 * 4

    def test_deterministic_for_seed(self):
        """Test equal seeds produce identical grids and maps."""
        config = SectorConfig(rows=6, cols=6, seed=1234)
        first = generate_sector(config)
        second = generate_sector(config)
        assert first.grid_lines == second.grid_lines
        assert first.systems.row_major() == second.systems.row_major()

    def test_deterministic_for_script(self, scripted):
        """Test identical scripts produce identical grids and maps."""
        script = [6, 2, 3, 5, 1, 4, 6, 6, 2, 1, 3, 3, 5]
        config = SectorConfig(rows=3, cols=4)
        first = generate_sector(config, source=scripted(script, cycle=True))
        second = generate_sector(config, source=scripted(script, cycle=True))
        assert first.grid_lines == second.grid_lines
        assert first.systems.row_major() == second.systems.row_major()


class TestAdvance:
    """Test single state machine steps."""

    def test_transitions_diagonal_two(self, scripted):
        """Test one row block for D = 2."""
        context = _context(GridGeometry(1, 2, 5, 2), scripted([1], cycle=True))
        phases = []
        state = INITIAL_STATE
        for _ in range(4):
            phases.append(state)
            state = advance(state, 1, context).next_state

        assert phases == [
            DrawState(Phase.DIAGONALS_UPPER, 0),
            DrawState(Phase.MIDDLES),
            DrawState(Phase.DIAGONALS_LOWER, 0),
            DrawState(Phase.BOTTOM_EDGE),
        ]
        assert state == INITIAL_STATE

    def test_transitions_diagonal_three(self, scripted):
        """Test one row block for D = 3."""
        context = _context(GridGeometry(1, 2, 5, 3), scripted([1], cycle=True))
        phases = []
        state = INITIAL_STATE
        for _ in range(6):
            phases.append(state)
            state = advance(state, 1, context).next_state

        assert phases == [
            DrawState(Phase.DIAGONALS_UPPER, 0),
            DrawState(Phase.DIAGONALS_UPPER, 1),
            DrawState(Phase.MIDDLES),
            DrawState(Phase.DIAGONALS_LOWER, 0),
            DrawState(Phase.DIAGONALS_LOWER, 1),
            DrawState(Phase.BOTTOM_EDGE),
        ]
        assert state == INITIAL_STATE

    def test_placements_returned_not_stored(self, scripted):
        """Test a step reports systems instead of storing them."""
        context = _context(GridGeometry(1, 2, 5, 2), scripted([6, 6] + ASTEROID_DRAWS))
        step = advance(DrawState(Phase.MIDDLES), 1, context)

        assert step.placements == ((HexCoordinate(1, 1), ASTEROID),)
        assert step.next_state == DrawState(Phase.DIAGONALS_LOWER, 0)
        assert step.line == "01  /   o   \\_____"

    def test_diagonals_draw_nothing(self, scripted):
        """Test diagonal lines never consume draws."""
        source = scripted([])
        context = _context(GridGeometry(2, 4, 5, 3), source)
        advance(DrawState(Phase.DIAGONALS_UPPER, 0), 2, context)
        advance(DrawState(Phase.DIAGONALS_LOWER, 1), 2, context)
        assert source.consumed == 0

    def test_closing_row_has_no_star_checks(self, scripted):
        """Test the row after the last only closes the grid."""
        source = scripted([])
        context = _context(GridGeometry(2, 4, 5, 2), source)

        middle = advance(DrawState(Phase.MIDDLES), 3, context)
        lower = advance(DrawState(Phase.DIAGONALS_LOWER, 0), 3, context)
        bottom = advance(DrawState(Phase.BOTTOM_EDGE), 3, context)

        assert middle.line == "            \\_____/       \\_____/"
        assert middle.placements == ()
        assert lower.line == ""
        assert bottom.line == ""
        assert bottom.next_state == INITIAL_STATE
        assert source.consumed == 0
