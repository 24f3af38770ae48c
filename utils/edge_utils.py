"""
Shared border geometry helpers.

Distances from each cell to the four grid edges, used to bound directional walks.
"""

import numpy as np
from typing import Dict


def border_distances(grid: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Directional distance fields to the grid border (closed-form).

    Input:
      grid: H×W numpy array (any values; only the shape is used)

    Output:
      {
        "d_top": H×W int array (cells between (r, c) and row 0),
        "d_bottom": H×W int array (cells between (r, c) and row H-1),
        "d_left": H×W int array (cells between (r, c) and col 0),
        "d_right": H×W int array (cells between (r, c) and col W-1),
      }

    Note:
      Border cells have distance 0 in at least one direction.
    """
    H, W = grid.shape

    rows = np.arange(H, dtype=int).reshape(H, 1)
    cols = np.arange(W, dtype=int).reshape(1, W)

    d_top = np.broadcast_to(rows, (H, W)).copy()
    d_bottom = np.broadcast_to((H - 1) - rows, (H, W)).copy()
    d_left = np.broadcast_to(cols, (H, W)).copy()
    d_right = np.broadcast_to((W - 1) - cols, (H, W)).copy()

    return {
        "d_top": d_top,
        "d_bottom": d_bottom,
        "d_left": d_left,
        "d_right": d_right,
    }


def on_border(grid: np.ndarray) -> np.ndarray:
    """H×W boolean mask, True on the outer frame."""
    d = border_distances(grid)
    return (
        (d["d_top"] == 0)
        | (d["d_bottom"] == 0)
        | (d["d_left"] == 0)
        | (d["d_right"] == 0)
    )
