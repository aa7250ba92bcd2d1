"""Star system data model."""

from dataclasses import dataclass

from ..utils.constants import (
    ATMOSPHERE_RANGE,
    GOVERNMENT_RANGE,
    HYDROGRAPHICS_RANGE,
    LAW_LEVEL_RANGE,
    POPULATION_RANGE,
    SIZE_RANGE,
    STARPORT_CLASSES,
    TECHNOLOGY_RANGE,
)


@dataclass(frozen=True)
class HexCoordinate:
    """One hex cell on the sector map, 1-based."""

    row: int
    col: int

    def __post_init__(self):
        """Validate coordinate after initialization."""
        if self.row < 1:
            raise ValueError(f"Invalid row: {self.row} (must be >= 1)")
        if self.col < 1:
            raise ValueError(f"Invalid col: {self.col} (must be >= 1)")


@dataclass(frozen=True)
class StarSystemProfile:
    """Universal World Profile of a generated star system.

    Profiles are immutable once generated. The generator clamps every
    attribute into range, so the validation below only trips on hand-built
    profiles.
    """

    size: int  # 0-10
    atmosphere: int  # 0-15
    hydrographics: int  # 0-10
    population: int  # 0-10
    government: int  # 0-13
    law_level: int  # 0-15
    starport: str  # A, B, C, D, E or X
    technology: int  # 0-99

    def __post_init__(self):
        """Validate profile data after initialization."""
        for name, (low, high) in (
            ("size", SIZE_RANGE),
            ("atmosphere", ATMOSPHERE_RANGE),
            ("hydrographics", HYDROGRAPHICS_RANGE),
            ("population", POPULATION_RANGE),
            ("government", GOVERNMENT_RANGE),
            ("law_level", LAW_LEVEL_RANGE),
            ("technology", TECHNOLOGY_RANGE),
        ):
            value = getattr(self, name)
            if not (low <= value <= high):
                raise ValueError(f"Invalid {name}: {value} (must be {low}-{high})")
        if self.starport not in STARPORT_CLASSES:
            raise ValueError(
                f"Invalid starport: {self.starport} (must be one of {', '.join(STARPORT_CLASSES)})"
            )
