"""
04_scenic: How far can each tree see.

Stage: scenic
Walks outward from a tree in the four cardinal directions and multiplies the
viewing distances into a scenic score; scans the grid for the best vantage point.
"""

from typing import Dict, Tuple
import logging

import numpy as np

from utils.edge_utils import border_distances, on_border


# (d-field bounding the walk, row step, col step)
DIRECTIONS = {
    "up": ("d_top", -1, 0),
    "down": ("d_bottom", 1, 0),
    "left": ("d_left", 0, -1),
    "right": ("d_right", 0, 1),
}


def _check_coord(grid: np.ndarray, row: int, col: int) -> None:
    """Raise IndexError unless (row, col) lies inside the grid."""
    H, W = grid.shape
    if not (0 <= row < H and 0 <= col < W):
        raise IndexError(f"Coordinate ({row}, {col}) outside grid of shape ({H}, {W})")


def _distances_at(
    grid: np.ndarray,
    row: int,
    col: int,
    fields: Dict[str, np.ndarray],
) -> Dict[str, int]:
    origin = grid[row, col]
    distances = {}

    for name, (field, dr, dc) in DIRECTIONS.items():
        reach = int(fields[field][row, col])
        dist = 0
        r, c = row, col
        for _ in range(reach):
            r += dr
            c += dc
            dist += 1
            if grid[r, c] >= origin:
                break
        distances[name] = dist

    return distances


def viewing_distances(grid: np.ndarray, row: int, col: int) -> Dict[str, int]:
    """
    Viewing distance in each direction from (row, col).

    The first tree at least as tall as the origin blocks the view and is counted.
    A walk that reaches the edge counts every tree passed.

    Output:
      {"up": int, "down": int, "left": int, "right": int}

    Raises:
      IndexError if (row, col) is outside the grid
    """
    _check_coord(grid, row, col)
    return _distances_at(grid, row, col, border_distances(grid))


def scenic_score(grid: np.ndarray, row: int, col: int) -> int:
    """Product of the four viewing distances; 0 on the border."""
    score = 1
    for d in viewing_distances(grid, row, col).values():
        score *= d
    return score


def scenic_scores(grid: np.ndarray) -> np.ndarray:
    """H×W int array of scenic scores for every coordinate."""
    H, W = grid.shape
    fields = border_distances(grid)
    border = on_border(grid)
    scores = np.zeros((H, W), dtype=np.int64)

    for r in range(H):
        for c in range(W):
            if border[r, c]:
                continue
            score = 1
            for d in _distances_at(grid, r, c, fields).values():
                score *= d
            scores[r, c] = score

    return scores


def best_vantage(grid: np.ndarray, trace: bool = False) -> Tuple[int, Tuple[int, int]]:
    """
    Stage: scenic

    Input:
      grid: H×W height grid (either orientation; the score is symmetric)
      trace: if True, log the winning coordinate and its distances

    Output:
      (score, (row, col)) for the highest score; ties go to the first
      coordinate in row-major order. Starts from (0, (0, 0)), so grids with
      no interior yield 0.
    """
    scores = scenic_scores(grid)

    best = 0
    best_rc = (0, 0)
    H, W = scores.shape
    for r in range(H):
        for c in range(W):
            if scores[r, c] > best:
                best = int(scores[r, c])
                best_rc = (r, c)

    if trace:
        logging.info(f"[scenic] best score={best} at (row={best_rc[0]}, col={best_rc[1]})")
        if best > 0:
            logging.info(f"[scenic] distances={viewing_distances(grid, *best_rc)}")

    return best, best_rc
