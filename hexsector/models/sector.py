"""Sector map storage and run result container."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .config import SectorConfig
from .star_system import HexCoordinate, StarSystemProfile


class SectorMap:
    """Sparse store of star systems keyed by hex coordinate.

    The map only grows: systems are placed while the grid is drawn and read
    back afterwards for the listing. Storage is unordered; callers pick the
    order when reading.
    """

    def __init__(self) -> None:
        self._systems: Dict[HexCoordinate, StarSystemProfile] = {}

    def place(self, coord: HexCoordinate, profile: StarSystemProfile) -> None:
        """Store a system at coord.

        Raises:
            ValueError: If a system already occupies coord
        """
        if coord in self._systems:
            raise ValueError(f"Hex ({coord.row}, {coord.col}) already holds a star system")
        self._systems[coord] = profile

    def get(self, coord: HexCoordinate) -> Optional[StarSystemProfile]:
        return self._systems.get(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._systems

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[HexCoordinate]:
        return iter(self._systems)

    def row_major(self) -> List[Tuple[HexCoordinate, StarSystemProfile]]:
        """Entries sorted by row, then column."""
        return sorted(self._systems.items(), key=lambda item: (item[0].row, item[0].col))

    def column_major(self) -> List[Tuple[HexCoordinate, StarSystemProfile]]:
        """Entries sorted by column, then row."""
        return sorted(self._systems.items(), key=lambda item: (item[0].col, item[0].row))


@dataclass
class Sector:
    """Result of one generation run: the drawn grid and the systems on it."""

    config: SectorConfig
    grid_lines: List[str] = field(default_factory=list)
    systems: SectorMap = field(default_factory=SectorMap)
