"""Cellular (Voronoi) noise built from jittered per-cell feature points."""

from __future__ import annotations

import math

from ..core.exceptions import NoiseConfigError
from ..core.funcs import CellFunc, DistanceFunc
from ..core.noise_util import cell_offset, fast_round, value_coord_2d
from .base import NoiseSource
from .params import NoiseParams


class Cell(NoiseSource):
    """Voronoi cells valued by the nearest feature point.

    The 3x3 block of cells around the rounded query position is searched for
    the nearest feature point under ``dist_func``. ``cell_func`` then selects
    the output: the hashed value of the winning cell, a lookup of the params'
    source module at the feature point, or the distance itself.
    """

    def __init__(self, params: NoiseParams) -> None:
        self.cell_func = params.cell_func
        self.dist_func = params.dist_func
        self.lookup = params.source
        if self.cell_func is CellFunc.NOISE_LOOKUP:
            if self.lookup is None:
                raise NoiseConfigError("CellFunc.NOISE_LOOKUP requires a source module")
            if params.frequency == 0:
                raise NoiseConfigError("CellFunc.NOISE_LOOKUP requires a non-zero frequency")
            raw_min, raw_max = self.lookup.min_value(), self.lookup.max_value()
        elif self.cell_func is CellFunc.DISTANCE:
            raw_min, raw_max = 0.0, self.dist_func.nearest_bound
        else:
            raw_min, raw_max = -1.0, 1.0
        super().__init__(params, raw_min, raw_max)

    def raw_value(self, x: float, y: float) -> float:
        xr = fast_round(x)
        yr = fast_round(y)

        distance = math.inf
        xc = yc = 0
        px = py = 0.0
        for xi in range(xr - 1, xr + 2):
            for yi in range(yr - 1, yr + 2):
                vx, vy = cell_offset(self.seed, xi, yi)
                d = self.dist_func.apply(xi - x + vx, yi - y + vy)
                if d < distance:
                    distance = d
                    xc, yc = xi, yi
                    px, py = xi + vx, yi + vy

        if self.cell_func is CellFunc.DISTANCE:
            return distance
        if self.cell_func is CellFunc.NOISE_LOOKUP:
            # the lookup module works in unscaled coordinates
            return self.lookup.evaluate(px / self.frequency, py / self.frequency)
        return value_coord_2d(self.seed, xc, yc)


class CellEdge(NoiseSource):
    """Voronoi edges from the nearest and second-nearest feature points."""

    def __init__(self, params: NoiseParams) -> None:
        self.edge_func = params.edge_func
        self.dist_func: DistanceFunc = params.dist_func
        raw_min, raw_max = self.edge_func.bounds(self.dist_func)
        super().__init__(params, raw_min, raw_max)

    def raw_value(self, x: float, y: float) -> float:
        xr = fast_round(x)
        yr = fast_round(y)

        nearest = math.inf
        second = math.inf
        for xi in range(xr - 1, xr + 2):
            for yi in range(yr - 1, yr + 2):
                vx, vy = cell_offset(self.seed, xi, yi)
                d = self.dist_func.apply(xi - x + vx, yi - y + vy)
                second = max(min(second, d), nearest)
                nearest = min(nearest, d)

        return self.edge_func.apply(nearest, second)
