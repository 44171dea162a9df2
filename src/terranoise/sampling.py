"""Evaluate modules over regular grids."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .core.module import Module


def sample_grid(
    module: Module,
    width: int,
    height: int,
    x: float = 0.0,
    y: float = 0.0,
    step: float = 1.0,
) -> NDArray[np.float64]:
    """Evaluate a module on a width x height grid of points.

    Args:
        module: Module to evaluate
        width: Number of columns
        height: Number of rows
        x: X coordinate of the first column
        y: Y coordinate of the first row
        step: Spacing between neighbouring points

    Returns:
        Array of shape (height, width); ``result[row, col]`` holds
        ``module.evaluate(x + col * step, y + row * step)``
    """
    xs = x + np.arange(width, dtype=np.float64) * step
    ys = y + np.arange(height, dtype=np.float64) * step

    result = np.empty((height, width), dtype=np.float64)
    for row, py in enumerate(ys.tolist()):
        for col, px in enumerate(xs.tolist()):
            result[row, col] = module.evaluate(px, py)
    return result
