"""
01_present: Load the survey text into a height grid.

Stage: present
Parses one line of digits per row into a validated numpy grid (row-major, int8).
"""

from typing import List
import logging
import numpy as np


MIN_HEIGHT = 0
MAX_HEIGHT = 9


def parse_row(line: str, line_no: int = 1) -> np.ndarray:
    """
    Convert one line of digit characters to a 1-D array of heights.

    Raises:
        ValueError on any character that is not an ASCII digit
        in MIN_HEIGHT..MAX_HEIGHT
    """
    heights: List[int] = []
    for col, ch in enumerate(line):
        h = ord(ch) - ord("0")
        if not MIN_HEIGHT <= h <= MAX_HEIGHT:
            raise ValueError(
                f"Non-digit character {ch!r} at line {line_no}, column {col + 1}"
            )
        heights.append(h)
    return np.array(heights, dtype=np.int8)


def _to_grid(rows: List[np.ndarray]) -> np.ndarray:
    """
    Stack parsed rows into a validated grid.

    Validates:
    - At least one row
    - No empty row
    - All rows have the same length

    Returns:
        np.ndarray[int8] of shape (H, W)

    Raises:
        ValueError if validation fails
    """
    if not rows:
        raise ValueError("Grid is empty (no rows)")

    W = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) == 0:
            raise ValueError(f"Empty row at line {r + 1}")
        if len(row) != W:
            raise ValueError(
                f"Jagged grid: line {r + 1} has {len(row)} columns, expected {W}"
            )

    return np.stack(rows).astype(np.int8)


def parse_grid(text: str) -> np.ndarray:
    """Parse text (one row per line) into an H×W height grid."""
    rows = [parse_row(line, line_no=i + 1) for i, line in enumerate(text.splitlines())]
    return _to_grid(rows)


def load(text: str, flip: bool = False, trace: bool = False) -> np.ndarray:
    """
    Stage: present

    Input:
      text: raw survey text, blank lines already trimmed by the caller
      flip: if True, flip the grid vertically (row 0 = bottom row of the survey)
      trace: if True, log shape and height range

    Output:
      grid: H×W np.ndarray[int8]. A new array; callers may not rely on it
      sharing memory with anything else.
    """
    grid = parse_grid(text)

    if flip:
        grid = np.flipud(grid).copy()

    if trace:
        H, W = grid.shape
        logging.info(f"[present] shape=({H}, {W}) flip={flip}")
        logging.info(f"[present] heights min={int(grid.min())} max={int(grid.max())}")

    return grid
