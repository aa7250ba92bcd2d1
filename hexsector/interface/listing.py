"""Star system listing printed after the grid.

Each occupied hex becomes one line: four coordinate digits, four spaces and
the world profile. The axis style only changes how the coordinates are
printed and sorted.
"""

from typing import Callable, List, Tuple

from pydantic import BaseModel, Field

from ..models.config import AxisStyle
from ..models.sector import SectorMap
from ..models.star_system import HexCoordinate, StarSystemProfile
from .formatter import encode, encode_ehex

Encoder = Callable[[StarSystemProfile], str]


class SystemEntry(BaseModel):
    """One listed star system."""

    first: int = Field(description="Coordinate printed first (row or x)")
    second: int = Field(description="Coordinate printed second (col or y)")
    row: int
    col: int
    uwp: str
    starport: str
    size: int
    atmosphere: int
    hydrographics: int
    population: int
    government: int
    law_level: int
    technology: int


class SectorListing(BaseModel):
    """All star systems of a sector in listing order."""

    axis_style: AxisStyle
    count: int
    systems: list[SystemEntry] = Field(default_factory=list)


def ordered_entries(
    sector_map: SectorMap, axis_style: AxisStyle
) -> List[Tuple[Tuple[int, int], HexCoordinate, StarSystemProfile]]:
    """Entries in listing order with their printed coordinate pair.

    Returns:
        List of ((first, second), coord, profile); row-major with (row, col)
        for ROW_COL, column-major with (col, row) for XY
    """
    if axis_style is AxisStyle.ROW_COL:
        return [((c.row, c.col), c, p) for c, p in sector_map.row_major()]
    return [((c.col, c.row), c, p) for c, p in sector_map.column_major()]


def format_entry(first: int, second: int, profile: StarSystemProfile, encoder: Encoder = encode) -> str:
    return f"{first:02d}{second:02d}    {encoder(profile)}"


def listing_lines(sector_map: SectorMap, axis_style: AxisStyle, use_ehex: bool = False) -> List[str]:
    """One text line per star system, in axis-style order."""
    encoder = encode_ehex if use_ehex else encode
    return [
        format_entry(first, second, profile, encoder)
        for (first, second), _, profile in ordered_entries(sector_map, axis_style)
    ]


def build_listing(sector_map: SectorMap, axis_style: AxisStyle, use_ehex: bool = False) -> SectorListing:
    encoder = encode_ehex if use_ehex else encode
    systems = [
        SystemEntry(
            first=first,
            second=second,
            row=coord.row,
            col=coord.col,
            uwp=encoder(profile),
            starport=profile.starport,
            size=profile.size,
            atmosphere=profile.atmosphere,
            hydrographics=profile.hydrographics,
            population=profile.population,
            government=profile.government,
            law_level=profile.law_level,
            technology=profile.technology,
        )
        for (first, second), coord, profile in ordered_entries(sector_map, axis_style)
    ]
    return SectorListing(axis_style=axis_style, count=len(systems), systems=systems)


def listing_json(sector_map: SectorMap, axis_style: AxisStyle, use_ehex: bool = False) -> str:
    """Listing as an indented JSON document."""
    return build_listing(sector_map, axis_style, use_ehex).model_dump_json(indent=2)
