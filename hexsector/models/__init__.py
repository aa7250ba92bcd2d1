"""Data models for the sector generator."""

from .config import AxisStyle, GridGeometry, SectorConfig
from .sector import Sector, SectorMap
from .star_system import HexCoordinate, StarSystemProfile

__all__ = [
    "AxisStyle",
    "GridGeometry",
    "HexCoordinate",
    "Sector",
    "SectorConfig",
    "SectorMap",
    "StarSystemProfile",
]
