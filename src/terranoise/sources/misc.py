"""Simple leaf modules: constant, per-cell random and sine waves."""

from __future__ import annotations

import math

from ..core.module import Module
from ..core.noise_util import map_range, value_coord_2d
from .base import NoiseSource
from .params import NoiseParams


class Constant(Module):
    """Returns the same value everywhere."""

    def __init__(self, value: float) -> None:
        super().__init__(value, value)
        self.value = value

    def evaluate(self, x: float, y: float) -> float:
        return self.value


class Rand(NoiseSource):
    """White noise: one hashed value per integer cell of the scaled plane."""

    def __init__(self, params: NoiseParams) -> None:
        super().__init__(params, -1.0, 1.0)

    def raw_value(self, x: float, y: float) -> float:
        return value_coord_2d(self.seed, math.floor(x), math.floor(y))


class Sin(NoiseSource):
    """Sine wave along x, optionally phase-shifted by a source module.

    The phase module is sampled at the unscaled coordinate, so a noisy source
    bends the wave fronts without changing their spacing.
    """

    def __init__(self, params: NoiseParams) -> None:
        super().__init__(params, -1.0, 1.0)
        self.phase = params.source

    def evaluate(self, x: float, y: float) -> float:
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan
        phase = 0.0 if self.phase is None else self.phase.evaluate(x, y)
        return map_range(self.raw_value(x * self.frequency + phase, y * self.frequency), -1.0, 1.0)

    def raw_value(self, x: float, y: float) -> float:
        return math.sin(x)
