"""Mutable configuration record that constructs noise sources."""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Callable

from ..core.exceptions import NoiseConfigError
from ..core.funcs import CellFunc, DistanceFunc, EdgeFunc, Interpolation
from ..core.module import Module
from ..modifiers.turbulence import Turbulence
from .base import NoiseSource
from .cell import Cell, CellEdge
from .cubic import Cubic
from .misc import Constant, Rand, Sin
from .params import NoiseParams, SourceType
from .perlin import Billow, Perlin, Ridge
from .simplex import Simplex

logger = logging.getLogger(__name__)

DEFAULT_SEED = 1337
DEFAULT_OCTAVES = 3
DEFAULT_GAIN = 0.5
DEFAULT_RIDGE_GAIN = 0.975
DEFAULT_LACUNARITY = 2.0
DEFAULT_FREQUENCY = 0.01

SOURCE_FACTORIES: dict[SourceType, Callable[[NoiseParams], NoiseSource]] = {
    SourceType.PERLIN: Perlin,
    SourceType.SIMPLEX: Simplex,
    SourceType.RIDGE: Ridge,
    SourceType.BILLOW: Billow,
    SourceType.CUBIC: Cubic,
    SourceType.CELL: Cell,
    SourceType.CELL_EDGE: CellEdge,
    SourceType.SIN: Sin,
    SourceType.RAND: Rand,
}


@dataclass
class Builder:
    """Collects generator settings and turns them into modules.

    The builder can be mutated and reused freely: every module it constructs
    receives its own frozen NoiseParams snapshot, so later changes never
    affect modules that were already built.

    Attributes:
        seed: Base seed
        octaves: Number of fractal layers
        gain: Per-octave amplitude multiplier; None picks the family default
            (0.975 for ridge noise, 0.5 otherwise)
        lacunarity: Per-octave frequency multiplier
        frequency: Base frequency (see also ``scale``)
        interpolation: Lattice smoothing kernel
        cell_func: Cellular noise output
        edge_func: Cellular edge noise output
        dist_func: Cellular distance metric
        source: Module wrapped by turbulence, sine phase or cell lookups
        power: Displacement strength used by ``turbulence()``

    Example:
        builder = Builder(seed=42, octaves=4, frequency=1 / 256)
        continents = builder.perlin()
        builder.seed += 1
        mountains = builder.ridge()
    """

    seed: int = DEFAULT_SEED
    octaves: int = DEFAULT_OCTAVES
    gain: float | None = None
    lacunarity: float = DEFAULT_LACUNARITY
    frequency: float = DEFAULT_FREQUENCY
    interpolation: Interpolation = Interpolation.HERMITE
    cell_func: CellFunc = CellFunc.CELL_VALUE
    edge_func: EdgeFunc = EdgeFunc.DISTANCE_2
    dist_func: DistanceFunc = DistanceFunc.EUCLIDEAN
    source: Module | None = None
    power: float = 1.0

    @property
    def scale(self) -> float:
        """Feature size in input units; the reciprocal of ``frequency``.

        A zero frequency has an infinite feature size.
        """
        if self.frequency == 0:
            return math.inf
        return 1.0 / self.frequency

    @scale.setter
    def scale(self, value: float) -> None:
        if value == 0:
            raise NoiseConfigError("scale must be non-zero")
        self.frequency = 1.0 / value

    def copy(self, **changes) -> Builder:
        """Return an independent builder with some fields replaced."""
        return dataclasses.replace(self, **changes)

    def snapshot(self, default_gain: float = DEFAULT_GAIN) -> NoiseParams:
        """Freeze the current settings into a NoiseParams."""
        return NoiseParams(
            seed=self.seed,
            octaves=self.octaves,
            gain=default_gain if self.gain is None else self.gain,
            lacunarity=self.lacunarity,
            frequency=self.frequency,
            interpolation=self.interpolation,
            cell_func=self.cell_func,
            edge_func=self.edge_func,
            dist_func=self.dist_func,
            source=self.source,
        )

    def build(self, kind: SourceType | str) -> NoiseSource:
        """Construct the generator family named by ``kind``.

        Args:
            kind: A SourceType member or its string value (e.g. "cell_edge")

        Returns:
            A new source owning a snapshot of the current settings

        Raises:
            NoiseConfigError: If the kind is unknown or the settings are invalid
        """
        if not isinstance(kind, SourceType):
            try:
                kind = SourceType(str(kind).lower())
            except ValueError:
                raise NoiseConfigError(f"Unknown source type: {kind!r}") from None

        default_gain = DEFAULT_RIDGE_GAIN if kind is SourceType.RIDGE else DEFAULT_GAIN
        params = self.snapshot(default_gain)
        module = SOURCE_FACTORIES[kind](params)
        logger.debug(
            "Built %s source (seed=%d, octaves=%d, gain=%g, lacunarity=%g, frequency=%g)",
            kind.value, params.seed, params.octaves, params.gain, params.lacunarity, params.frequency,
        )
        return module

    def perlin(self) -> NoiseSource:
        return self.build(SourceType.PERLIN)

    def simplex(self) -> NoiseSource:
        return self.build(SourceType.SIMPLEX)

    def ridge(self) -> NoiseSource:
        return self.build(SourceType.RIDGE)

    def billow(self) -> NoiseSource:
        return self.build(SourceType.BILLOW)

    def cubic(self) -> NoiseSource:
        return self.build(SourceType.CUBIC)

    def cell(self) -> NoiseSource:
        return self.build(SourceType.CELL)

    def cell_edge(self) -> NoiseSource:
        return self.build(SourceType.CELL_EDGE)

    def sin(self) -> NoiseSource:
        return self.build(SourceType.SIN)

    def rand(self) -> NoiseSource:
        return self.build(SourceType.RAND)

    def constant(self, value: float) -> Module:
        return Constant(value)

    def turbulence(self) -> Turbulence:
        """Domain-warp ``source`` with two Perlin fields seeded seed and seed + 1.

        Raises:
            NoiseConfigError: If no source module has been set
        """
        if self.source is None:
            raise NoiseConfigError("turbulence() requires a source module")
        turb0 = self.copy(source=None).perlin()
        turb1 = self.copy(source=None, seed=self.seed + 1).perlin()
        logger.debug("Built turbulence (seed=%d, power=%g)", self.seed, self.power)
        return Turbulence(self.source, turb0, turb1, self.power)
