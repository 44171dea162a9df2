"""Immutable parameter snapshot owned by each noise source."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..core.exceptions import NoiseConfigError
from ..core.funcs import CellFunc, DistanceFunc, EdgeFunc, Interpolation

if TYPE_CHECKING:
    from ..core.module import Module


class SourceType(Enum):
    """Closed set of generator families a Builder can construct."""

    PERLIN = "perlin"
    SIMPLEX = "simplex"
    RIDGE = "ridge"
    BILLOW = "billow"
    CUBIC = "cubic"
    CELL = "cell"
    CELL_EDGE = "cell_edge"
    SIN = "sin"
    RAND = "rand"


@dataclass(frozen=True)
class NoiseParams:
    """Frozen copy of a Builder's settings.

    Attributes:
        seed: Base seed; octave i uses ``seed + i``
        octaves: Number of fractal layers (>= 1)
        gain: Amplitude multiplier applied per octave
        lacunarity: Frequency multiplier applied per octave
        frequency: Base frequency applied to input coordinates
        interpolation: Lattice smoothing kernel
        cell_func: Output of cellular noise
        edge_func: Output of cellular edge noise
        dist_func: Distance metric of cellular noise
        source: Optional input module (sine phase, cell lookup)
    """

    seed: int = 1337
    octaves: int = 3
    gain: float = 0.5
    lacunarity: float = 2.0
    frequency: float = 0.01
    interpolation: Interpolation = Interpolation.HERMITE
    cell_func: CellFunc = CellFunc.CELL_VALUE
    edge_func: EdgeFunc = EdgeFunc.DISTANCE_2
    dist_func: DistanceFunc = DistanceFunc.EUCLIDEAN
    source: Module | None = None

    def validate(self) -> None:
        """Raise NoiseConfigError if these parameters cannot build a source."""
        if self.octaves < 1:
            raise NoiseConfigError(f"octaves must be >= 1, got {self.octaves}")
        if not self.gain > 0:
            raise NoiseConfigError(f"gain must be positive, got {self.gain}")
        if not self.lacunarity > 0:
            raise NoiseConfigError(f"lacunarity must be positive, got {self.lacunarity}")
        if not math.isfinite(self.frequency):
            raise NoiseConfigError(f"frequency must be finite, got {self.frequency}")
