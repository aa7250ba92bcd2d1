#!/usr/bin/env python3
"""Hex Sector - Main entry point.

Draws a hex grid sector map as text, scatters star systems across it and
lists each system's Universal World Profile.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from hexsector.engine.sector_generator import stream_sector
from hexsector.interface.listing import listing_json, listing_lines
from hexsector.models import AxisStyle, SectorConfig, SectorMap
from hexsector.utils import (
    DEFAULT_COLS,
    DEFAULT_DIAGONAL_LENGTH,
    DEFAULT_HORIZONTAL_LENGTH,
    DEFAULT_ROWS,
    DEFAULT_WORLD_CHANCE_MODIFIER,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hex Sector - Traveller-style sector map generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # 10x8 sector, random seed
  %(prog)s --seed 42                        # Reproducible sector
  %(prog)s --rows 4 --cols 6 --axis rowcol  # Small sector, row-first listing
  %(prog)s --world-chance-modifier -2       # Sparser sector
  %(prog)s --diagonal-length 3 --horizontal-length 7  # Bigger hexes
  %(prog)s --json                           # Listing as JSON
        """,
    )

    parser.add_argument(
        "--rows",
        type=int,
        default=DEFAULT_ROWS,
        help=f"Number of hex rows (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=DEFAULT_COLS,
        help=f"Number of hex columns; an odd last column is not drawn (default: {DEFAULT_COLS})",
    )
    parser.add_argument(
        "--axis",
        choices=[style.value for style in AxisStyle],
        default=AxisStyle.XY.value,
        help="Listing coordinates: rowcol=row then column, xy=column (x) then row (y) (default: xy)",
    )
    parser.add_argument(
        "--world-chance-modifier",
        type=int,
        default=DEFAULT_WORLD_CHANCE_MODIFIER,
        help="Added to each 2d6 star check; more negative means a sparser sector "
        f"(default: {DEFAULT_WORLD_CHANCE_MODIFIER})",
    )
    parser.add_argument(
        "--horizontal-length",
        type=int,
        default=DEFAULT_HORIZONTAL_LENGTH,
        help=f"Length of hex top and bottom edges, at least 2 (default: {DEFAULT_HORIZONTAL_LENGTH})",
    )
    parser.add_argument(
        "--diagonal-length",
        type=int,
        default=DEFAULT_DIAGONAL_LENGTH,
        help=f"Text rows per slanted hex edge, at least 2 (default: {DEFAULT_DIAGONAL_LENGTH})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    parser.add_argument(
        "--ehex",
        action="store_true",
        help="List profiles with single-character eHex fields",
    )
    parser.add_argument("--json", action="store_true", help="Print the system listing as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Logs go to stderr so the map and listing can be piped cleanly
    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = SectorConfig(
            rows=args.rows,
            cols=args.cols,
            axis_style=AxisStyle(args.axis),
            world_chance_modifier=args.world_chance_modifier,
            horizontal_length=args.horizontal_length,
            diagonal_length=args.diagonal_length,
            seed=args.seed,
            ehex=args.ehex,
        )
    except ValidationError as e:
        print(f"Error: invalid sector options:\n{e}", file=sys.stderr)
        return 2

    sector_map = SectorMap()
    for line in stream_sector(config, sector_map):
        print(line)

    if args.json:
        print(listing_json(sector_map, config.axis_style, use_ehex=config.ehex))
    else:
        for line in listing_lines(sector_map, config.axis_style, use_ehex=config.ehex):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
