"""Base classes for leaf noise generators."""

from __future__ import annotations

import math
from abc import abstractmethod

from ..core.module import Module
from ..core.noise_util import map_range
from .params import NoiseParams


class NoiseSource(Module):
    """A seeded leaf generator whose output is normalised to [0, 1].

    Subclasses produce a raw value in frequency-scaled space and declare the
    analytic raw range it can reach; ``evaluate`` remaps that range onto
    [0, 1]. Non-finite coordinates yield NaN.
    """

    def __init__(self, params: NoiseParams, raw_min: float, raw_max: float) -> None:
        params.validate()
        super().__init__(0.0, 1.0)
        self.params = params
        self.seed = params.seed
        self.octaves = params.octaves
        self.gain = params.gain
        self.lacunarity = params.lacunarity
        self.frequency = params.frequency
        self.interpolation = params.interpolation
        self.raw_min = raw_min
        self.raw_max = raw_max

    def evaluate(self, x: float, y: float) -> float:
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan
        raw = self.raw_value(x * self.frequency, y * self.frequency)
        return map_range(raw, self.raw_min, self.raw_max)

    @abstractmethod
    def raw_value(self, x: float, y: float) -> float:
        """Un-normalised value at frequency-scaled coordinates."""


class FractalSource(NoiseSource):
    """Sums ``octaves`` layers of a single-octave kernel.

    Octave i is sampled at ``lacunarity**i`` times the base frequency with
    seed ``seed + i`` and weighted by ``gain**i``.
    """

    def raw_value(self, x: float, y: float) -> float:
        total = 0.0
        amplitude = 1.0
        for i in range(self.octaves):
            total += self.octave(x, y, self.seed + i) * amplitude
            x *= self.lacunarity
            y *= self.lacunarity
            amplitude *= self.gain
        return total

    @abstractmethod
    def octave(self, x: float, y: float, seed: int) -> float:
        """Single-octave value at (x, y)."""
