"""Gradient noise on a square lattice and its ridged/billowed variants."""

from __future__ import annotations

import math

from ..core.funcs import Interpolation
from ..core.noise_util import fractal_bound, grad_coord_2d, lerp
from .base import FractalSource
from .params import NoiseParams


def single_perlin(x: float, y: float, seed: int, interpolation: Interpolation) -> float:
    """Evaluate one octave of 2D Perlin noise.

    Args:
        x: Frequency-scaled x coordinate
        y: Frequency-scaled y coordinate
        seed: Octave seed
        interpolation: Kernel used to blend the four corner contributions

    Returns:
        Noise value in [-1, 1]
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xs = interpolation.apply(xd0)
    ys = interpolation.apply(yd0)

    xf0 = lerp(grad_coord_2d(seed, x0, y0, xd0, yd0), grad_coord_2d(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord_2d(seed, x0, y1, xd0, yd1), grad_coord_2d(seed, x1, y1, xd1, yd1), xs)
    return lerp(xf0, xf1, ys)


class Perlin(FractalSource):
    """Fractal Perlin noise.

    Each octave spans [-1, 1], so the raw sum is bounded by the sum of the
    octave amplitudes.
    """

    def __init__(self, params: NoiseParams) -> None:
        bound = fractal_bound(params.octaves, params.gain)
        super().__init__(params, -bound, bound)

    def octave(self, x: float, y: float, seed: int) -> float:
        return single_perlin(x, y, seed, self.interpolation)


class Ridge(FractalSource):
    """Perlin octaves folded as ``1 - |n|``, giving sharp crests."""

    def __init__(self, params: NoiseParams) -> None:
        super().__init__(params, 0.0, fractal_bound(params.octaves, params.gain))

    def octave(self, x: float, y: float, seed: int) -> float:
        return 1.0 - abs(single_perlin(x, y, seed, self.interpolation))


class Billow(FractalSource):
    """Perlin octaves folded as ``|n|``, giving rounded lumps."""

    def __init__(self, params: NoiseParams) -> None:
        super().__init__(params, 0.0, fractal_bound(params.octaves, params.gain))

    def octave(self, x: float, y: float, seed: int) -> float:
        return abs(single_perlin(x, y, seed, self.interpolation))
