"""Utility functions and constants for the sector generator."""

from .codes import ehex
from .constants import (
    DEFAULT_COLS,
    DEFAULT_DIAGONAL_LENGTH,
    DEFAULT_HORIZONTAL_LENGTH,
    DEFAULT_ROWS,
    DEFAULT_WORLD_CHANCE_MODIFIER,
    MIN_DIAGONAL_LENGTH,
    MIN_HORIZONTAL_LENGTH,
    STARPORT_CLASSES,
    WORLD_CHANCE_THRESHOLD,
)
from .dice import DiceEngine
from .rng import DrawSource, SectorRNG

__all__ = [
    "DEFAULT_COLS",
    "DEFAULT_DIAGONAL_LENGTH",
    "DEFAULT_HORIZONTAL_LENGTH",
    "DEFAULT_ROWS",
    "DEFAULT_WORLD_CHANCE_MODIFIER",
    "MIN_DIAGONAL_LENGTH",
    "MIN_HORIZONTAL_LENGTH",
    "STARPORT_CLASSES",
    "WORLD_CHANCE_THRESHOLD",
    "DiceEngine",
    "DrawSource",
    "SectorRNG",
    "ehex",
]
