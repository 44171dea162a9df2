"""Value noise interpolated with Catmull-Rom splines over a 4x4 neighbourhood."""

from __future__ import annotations

import math

from ..core.noise_util import CUBIC_2D_BOUNDING, cubic_lerp, fractal_bound, value_coord_2d
from .base import FractalSource
from .params import NoiseParams


def single_cubic(x: float, y: float, seed: int) -> float:
    """Evaluate one octave of cubic value noise in [-1, 1]."""
    x1 = math.floor(x)
    y1 = math.floor(y)
    xs = x - x1
    ys = y - y1

    rows = []
    for yi in range(y1 - 1, y1 + 3):
        rows.append(cubic_lerp(
            value_coord_2d(seed, x1 - 1, yi),
            value_coord_2d(seed, x1, yi),
            value_coord_2d(seed, x1 + 1, yi),
            value_coord_2d(seed, x1 + 2, yi),
            xs,
        ))

    return cubic_lerp(*rows, ys) * CUBIC_2D_BOUNDING


class Cubic(FractalSource):
    """Fractal cubic value noise."""

    def __init__(self, params: NoiseParams) -> None:
        bound = fractal_bound(params.octaves, params.gain)
        super().__init__(params, -bound, bound)

    def octave(self, x: float, y: float, seed: int) -> float:
        return single_cubic(x, y, seed)
