"""Sector configuration and grid geometry."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from ..utils.constants import (
    DEFAULT_COLS,
    DEFAULT_DIAGONAL_LENGTH,
    DEFAULT_HORIZONTAL_LENGTH,
    DEFAULT_ROWS,
    DEFAULT_WORLD_CHANCE_MODIFIER,
    MIN_DIAGONAL_LENGTH,
    MIN_HORIZONTAL_LENGTH,
)


class AxisStyle(str, Enum):
    """How coordinates are printed in the system listing.

    ROW_COL prints the row first and lists row by row; XY prints the column
    (x) first and lists column by column. The grid itself is unaffected.
    """

    ROW_COL = "rowcol"
    XY = "xy"


@dataclass(frozen=True)
class GridGeometry:
    """Dimensions of the drawn hex grid.

    `horizontal` is the length of a hex's flat top and bottom edges,
    `diagonal` the number of text rows each slanted edge spans.
    """

    rows: int
    cols: int
    horizontal: int
    diagonal: int

    def __post_init__(self):
        """Validate geometry after initialization."""
        if self.rows < 1:
            raise ValueError(f"Invalid rows: {self.rows} (must be >= 1)")
        if self.cols < 1:
            raise ValueError(f"Invalid cols: {self.cols} (must be >= 1)")
        if self.horizontal < MIN_HORIZONTAL_LENGTH:
            raise ValueError(
                f"Invalid horizontal edge length: {self.horizontal} "
                f"(must be >= {MIN_HORIZONTAL_LENGTH})"
            )
        if self.diagonal < MIN_DIAGONAL_LENGTH:
            raise ValueError(
                f"Invalid diagonal edge length: {self.diagonal} "
                f"(must be >= {MIN_DIAGONAL_LENGTH})"
            )

    @property
    def pairs(self) -> int:
        """Hex pairs drawn per row; an odd trailing column is dropped."""
        return self.cols // 2

    @property
    def pair_width(self) -> int:
        """Text columns taken by one pair of neighbouring hexes."""
        return 2 * (self.diagonal + self.horizontal)

    @property
    def interior_width(self) -> int:
        """Blank columns inside a hex at its widest text row."""
        return self.horizontal + 2 * (self.diagonal - 1)

    @property
    def star_marker(self) -> str:
        """Big hexes get a bigger symbol."""
        return "O" if self.diagonal > 2 else "o"


class SectorConfig(BaseModel):
    """Options for one sector generation run."""

    rows: int = Field(default=DEFAULT_ROWS, ge=1, description="Number of hex rows")
    cols: int = Field(default=DEFAULT_COLS, ge=1, description="Number of hex columns")
    axis_style: AxisStyle = Field(
        default=AxisStyle.XY, description="Coordinate order used by the system listing"
    )
    world_chance_modifier: int = Field(
        default=DEFAULT_WORLD_CHANCE_MODIFIER,
        description="Added to every 2d6 star check; negative values give a sparser sector",
    )
    horizontal_length: int = Field(
        default=DEFAULT_HORIZONTAL_LENGTH,
        ge=MIN_HORIZONTAL_LENGTH,
        description="Length of a hex's flat top and bottom edges",
    )
    diagonal_length: int = Field(
        default=DEFAULT_DIAGONAL_LENGTH,
        ge=MIN_DIAGONAL_LENGTH,
        description="Number of text rows spanned by a hex's slanted edges",
    )
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    ehex: bool = Field(default=False, description="List profiles with single-character eHex fields")

    def geometry(self) -> GridGeometry:
        """Grid geometry described by this configuration."""
        return GridGeometry(
            rows=self.rows,
            cols=self.cols,
            horizontal=self.horizontal_length,
            diagonal=self.diagonal_length,
        )
