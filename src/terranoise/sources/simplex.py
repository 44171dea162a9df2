"""Simplex noise on a skewed triangular lattice."""

from __future__ import annotations

import math

from ..core.noise_util import F2, G2, fractal_bound, grad_coord_2d
from .base import FractalSource
from .params import NoiseParams

# Peak per-octave signal observed for each octave count; index 0 is unused
SIMPLEX_SIGNALS = (1.00, 0.989, 0.810, 0.781, 0.708, 0.702, 0.696)


def _corner(seed: int, i: int, j: int, x: float, y: float) -> float:
    t = 0.5 - x * x - y * y
    if t < 0:
        return 0.0
    t *= t
    return t * t * grad_coord_2d(seed, i, j, x, y)


def single_simplex(x: float, y: float, seed: int) -> float:
    """Evaluate one octave of 2D simplex noise, roughly in [-1, 1]."""
    t = (x + y) * F2
    i = math.floor(x + t)
    j = math.floor(y + t)

    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1 + 2 * G2
    y2 = y0 - 1 + 2 * G2

    n0 = _corner(seed, i, j, x0, y0)
    n1 = _corner(seed, i + i1, j + j1, x1, y1)
    n2 = _corner(seed, i + 1, j + 1, x2, y2)
    return 50.0 * (n0 + n1 + n2)


def simplex_signal(octaves: int) -> float:
    return SIMPLEX_SIGNALS[min(octaves, len(SIMPLEX_SIGNALS) - 1)]


class Simplex(FractalSource):
    """Fractal simplex noise.

    Simplex octaves rarely reach their theoretical peak, so the raw bound
    uses a per-octave-count signal factor instead of 1.0.
    """

    def __init__(self, params: NoiseParams) -> None:
        bound = fractal_bound(params.octaves, params.gain, simplex_signal(params.octaves))
        super().__init__(params, -bound, bound)

    def octave(self, x: float, y: float, seed: int) -> float:
        return single_simplex(x, y, seed)
