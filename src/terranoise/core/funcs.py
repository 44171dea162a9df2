"""Selectable kernels: interpolation curves and cellular distance/edge functions."""

from __future__ import annotations

import math
from enum import Enum

from .noise_util import CELL_JITTER


class Interpolation(Enum):
    """Smoothing kernel applied to a fractional lattice offset in [0, 1]."""

    LINEAR = "linear"
    HERMITE = "hermite"  # 3t^2 - 2t^3
    QUINTIC = "quintic"  # 6t^5 - 15t^4 + 10t^3

    def apply(self, t: float) -> float:
        if self is Interpolation.HERMITE:
            return t * t * (3 - 2 * t)
        if self is Interpolation.QUINTIC:
            return t * t * t * (t * (t * 6 - 15) + 10)
        return t


class DistanceFunc(Enum):
    """Metric used to measure the distance to a cell's feature point.

    Each metric also exposes analytic upper bounds on the nearest and
    second-nearest feature point distance. The query point lies within half a
    cell (per axis) of the rounded cell centre, and every feature point is
    jittered by at most ``CELL_JITTER`` from its cell centre.
    """

    EUCLIDEAN = "euclidean"  # squared
    MANHATTAN = "manhattan"
    NATURAL = "natural"

    def apply(self, dx: float, dy: float) -> float:
        if self is DistanceFunc.EUCLIDEAN:
            return dx * dx + dy * dy
        if self is DistanceFunc.MANHATTAN:
            return abs(dx) + abs(dy)
        return abs(dx) + abs(dy) + dx * dx + dy * dy

    @property
    def nearest_bound(self) -> float:
        # the rounded cell's own point is at most (0.5, 0.5) + jitter away
        return self._bound(math.sqrt(0.5), 1.0)

    @property
    def second_bound(self) -> float:
        # the neighbour towards the query point is at most (1, 0.5) + jitter away
        return self._bound(math.sqrt(1.25), 1.5)

    def _bound(self, euclid: float, manhattan: float) -> float:
        l2 = (euclid + CELL_JITTER) ** 2
        l1 = manhattan + CELL_JITTER * math.sqrt(2.0)
        if self is DistanceFunc.EUCLIDEAN:
            return l2
        if self is DistanceFunc.MANHATTAN:
            return l1
        return l1 + l2


class CellFunc(Enum):
    """Output derived from the nearest feature point of a cellular field."""

    CELL_VALUE = "cell_value"
    NOISE_LOOKUP = "noise_lookup"
    DISTANCE = "distance"


class EdgeFunc(Enum):
    """Combination of nearest (d1) and second-nearest (d2) distances."""

    DISTANCE_2 = "distance_2"
    DISTANCE_2_ADD = "distance_2_add"
    DISTANCE_2_SUB = "distance_2_sub"
    DISTANCE_2_MUL = "distance_2_mul"
    DISTANCE_2_DIV = "distance_2_div"

    def apply(self, d1: float, d2: float) -> float:
        if self is EdgeFunc.DISTANCE_2_ADD:
            return d2 + d1
        if self is EdgeFunc.DISTANCE_2_SUB:
            return d2 - d1
        if self is EdgeFunc.DISTANCE_2_MUL:
            return d2 * d1
        if self is EdgeFunc.DISTANCE_2_DIV:
            return d1 / d2 if d2 > 0 else 0.0
        return d2

    def bounds(self, dist_func: DistanceFunc) -> tuple[float, float]:
        """Analytic raw output range for the given distance metric."""
        nearest = dist_func.nearest_bound
        second = dist_func.second_bound
        if self is EdgeFunc.DISTANCE_2_ADD:
            return 0.0, nearest + second
        if self is EdgeFunc.DISTANCE_2_MUL:
            return 0.0, nearest * second
        if self is EdgeFunc.DISTANCE_2_DIV:
            return 0.0, 1.0
        return 0.0, second
