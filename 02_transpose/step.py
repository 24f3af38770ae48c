"""
02_transpose: Swap rows and columns.

Stage: transpose
Lets the row scanners in later stages walk columns without a column-specific variant.
"""

import logging
import numpy as np


def transpose(grid: np.ndarray, trace: bool = False) -> np.ndarray:
    """
    Stage: transpose

    Input:
      grid: H×W height grid (H, W >= 1)
      trace: if True, log input and output shapes

    Output:
      W×H grid with out[j, i] == grid[i, j]. Always a fresh array, never a view,
      so mutating the result cannot touch the input.

    Raises:
      ValueError if grid is not 2D or has no cells
    """
    if grid.ndim != 2:
        raise ValueError(f"Grid must be 2D, got {grid.ndim}D")

    H, W = grid.shape
    if H == 0 or W == 0:
        raise ValueError(f"Cannot transpose empty grid of shape ({H}, {W})")

    out = grid.T.copy()

    if trace:
        logging.info(f"[transpose] ({H}, {W}) -> ({W}, {H})")

    return out
