r"""ASCII hex grid line primitives.

The grid is drawn as pairs of hexes. In each pair the left hex (odd column)
sits high and the right hex (even column) sits half a hex lower, so one text
row usually carries edges of both. With horizontal length H = 5 and diagonal
length D = 2, two rows of four columns look like:

           01     02     03     04
          _____         _____
         /     \       /     \
    01  /   o   \_____/       \_____
        \       /     \       /     \
         \_____/   o   \_____/       \
         /     \       /     \       /
    02  /       \_____/       \_____/
        \       /     \       /     \
         \_____/       \_____/   o   \
                \       /     \       /
                 \_____/       \_____/

Every function returns one line without trailing blanks. The star flags
passed to the middle and bottom lines are decided by the caller.
"""

from typing import Sequence

from ..models.config import GridGeometry

ROW_LABEL_WIDTH = 4  # Two-digit row number plus a two-space margin
BLANK_LABEL = " " * ROW_LABEL_WIDTH


def _finish(parts: Sequence[str]) -> str:
    return "".join(parts).rstrip()


def _interior(geometry: GridGeometry, has_star: bool) -> str:
    """Inside of a hex at its widest row, with the marker centred if present."""
    width = geometry.interior_width
    if not has_star:
        return " " * width
    left = (width - 1) // 2
    return " " * left + geometry.star_marker + " " * (width - 1 - left)


def column_header(geometry: GridGeometry) -> str:
    """Two-digit column numbers centred over each hex's flat top."""
    h, d = geometry.horizontal, geometry.diagonal
    parts = [BLANK_LABEL, " " * (d + (h - 2) // 2), "01"]
    for col in range(2, geometry.cols + 1):
        parts.append(" " * (h - 2 + d))
        parts.append(f"{col:02d}")
    return _finish(parts)


def top_edge(geometry: GridGeometry) -> str:
    """Flat tops of the first row's high hexes."""
    h, d = geometry.horizontal, geometry.diagonal
    parts = [BLANK_LABEL]
    for _ in range(geometry.pairs):
        parts.append(" " * d + "_" * h + " " * d + " " * h)
    return _finish(parts)


def upper_diagonal(
    geometry: GridGeometry, diag_row: int, close_previous: bool, lead: bool = True
) -> str:
    """Upper slants of the high hexes, which are also the lower slants of the
    previous row's low hexes.

    Args:
        geometry: Grid dimensions
        diag_row: 0-based index of the slanted text row
        close_previous: Append the slant closing the previous row's
            rightmost hex (False on the first row)
        lead: Draw the leftmost slash (False on the closing row, where no
            hex sits to its left)
    """
    h, d = geometry.horizontal, geometry.diagonal
    outer = d - diag_row - 1
    parts = [BLANK_LABEL]
    for pair in range(geometry.pairs):
        left = "/" if lead or pair > 0 else " "
        parts.append(" " * outer + left + " " * (h + 2 * diag_row) + "\\" + " " * outer + " " * h)
    if close_previous:
        parts.append(" " * outer + "/")
    return _finish(parts)


def middle(
    geometry: GridGeometry, row: int, stars: Sequence[bool], close_previous: bool
) -> str:
    """Widest row of the high hexes, carrying the row label and the flat
    tops of the low hexes."""
    h = geometry.horizontal
    parts = [f"{row:02d}  "]
    for has_star in stars:
        parts.append("/" + _interior(geometry, has_star) + "\\" + "_" * h)
    if close_previous:
        parts.append("/")
    return _finish(parts)


def closing_middle(geometry: GridGeometry) -> str:
    """Flat bottoms of the last row's low hexes; the grid's final line."""
    h = geometry.horizontal
    parts = [BLANK_LABEL]
    for pair in range(geometry.pairs):
        parts.append(("/" if pair > 0 else " ") + _interior(geometry, False) + "\\" + "_" * h)
    parts.append("/")
    return _finish(parts)


def lower_diagonal(geometry: GridGeometry, diag_row: int) -> str:
    """Lower slants of the high hexes and upper slants of the low hexes."""
    h, d = geometry.horizontal, geometry.diagonal
    parts = [BLANK_LABEL]
    for _ in range(geometry.pairs):
        parts.append(
            " " * diag_row + "\\" + " " * (h + 2 * (d - diag_row - 1)) + "/" + " " * (h + diag_row)
        )
    parts.append(" " * diag_row + "\\")
    return _finish(parts)


def bottom_edge(geometry: GridGeometry, stars: Sequence[bool]) -> str:
    """Flat bottoms of the high hexes, which is the widest row of the low hexes."""
    h, d = geometry.horizontal, geometry.diagonal
    parts = [BLANK_LABEL, " " * (d - 1)]
    for has_star in stars:
        parts.append("\\" + "_" * h + "/" + _interior(geometry, has_star))
    parts.append("\\")
    return _finish(parts)
