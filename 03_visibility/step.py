"""
03_visibility: Which trees can be seen from outside the grid.

Stage: visibility
Double monotonic sweep per row; columns are handled by sweeping the rows of the
transposed grid and mapping indices back.
"""

from typing import Iterable, List, Set, Tuple
import logging

import numpy as np


# Lower than any real height, so the edge tree of every sweep is visible
NO_TREE = -1


def _sweep(heights: Iterable[Tuple[int, int]]) -> Set[int]:
    """Indices that beat the running max, in the order given."""
    seen = set()
    highest = NO_TREE
    for i, h in heights:
        if h > highest:
            highest = h
            seen.add(i)
    return seen


def visible_idxs(seq) -> Set[int]:
    """
    Indices of a row (or column) visible from at least one of its two ends.

    Strictly taller wins: a tree equal to the tallest one before it stays hidden.

    Input:
      seq: 1-D sequence of heights (list or np.ndarray)

    Output:
      set of int indices; contains 0 and len(seq) - 1 for any non-empty seq
    """
    heights = [(i, int(h)) for i, h in enumerate(seq)]
    forward = _sweep(heights)
    backward = _sweep(reversed(heights))
    return forward | backward


def visible_coords(
    grid: np.ndarray,
    transposed: np.ndarray,
    trace: bool = False,
) -> Set[Tuple[int, int]]:
    """
    Stage: visibility

    Input:
      grid: H×W height grid from 01_present.load
      transposed: W×H grid from 02_transpose.transpose(grid)
      trace: if True, log per-pass and total counts

    Output:
      set of (row, col) coordinates visible from any edge
    """
    H, W = grid.shape
    if transposed.shape != (W, H):
        raise ValueError(
            f"Transposed grid shape {transposed.shape} does not match ({W}, {H})"
        )

    coords: Set[Tuple[int, int]] = set()

    # Rows: looking in from the left and right edges
    for i in range(H):
        for j in visible_idxs(grid[i]):
            coords.add((i, j))
    n_rows = len(coords)

    # Columns: row j of the transposed grid is column j of the original
    for j in range(W):
        for i in visible_idxs(transposed[j]):
            coords.add((i, j))

    if trace:
        logging.info(f"[visibility] row passes: {n_rows} visible")
        logging.info(f"[visibility] after column passes: {len(coords)} visible of {H * W}")
        for line in render_mask(visibility_mask(grid.shape, coords)):
            logging.info(f"[visibility] {line}")

    return coords


def visibility_mask(shape: Tuple[int, int], coords: Set[Tuple[int, int]]) -> np.ndarray:
    """H×W boolean mask, True at each visible coordinate."""
    mask = np.zeros(shape, dtype=bool)
    for r, c in coords:
        mask[r, c] = True
    return mask


def render_mask(mask: np.ndarray) -> List[str]:
    """One string per row: '#' for a visible tree, '.' for a hidden one."""
    return ["".join("#" if v else "." for v in row) for row in mask]
