"""Sector configuration defaults and table limits."""

# Grid defaults
DEFAULT_ROWS = 10
DEFAULT_COLS = 8
DEFAULT_HORIZONTAL_LENGTH = 5
DEFAULT_DIAGONAL_LENGTH = 2
DEFAULT_WORLD_CHANCE_MODIFIER = 0

# Smallest geometry the line drawer can align
MIN_HORIZONTAL_LENGTH = 2  # Column labels are 2 digits wide
MIN_DIAGONAL_LENGTH = 2

# Per-hex star check: 2d6 + modifier below this value means empty space
WORLD_CHANCE_THRESHOLD = 4

# Attribute ranges (inclusive)
SIZE_RANGE = (0, 10)
ATMOSPHERE_RANGE = (0, 15)
HYDROGRAPHICS_RANGE = (0, 10)
POPULATION_RANGE = (0, 10)
GOVERNMENT_RANGE = (0, 13)
LAW_LEVEL_RANGE = (0, 15)
TECHNOLOGY_RANGE = (0, 99)
STARPORT_ROLL_RANGE = (2, 11)  # Natural 12 folds into the 11 bucket

STARPORT_CLASSES = ("A", "B", "C", "D", "E", "X")
