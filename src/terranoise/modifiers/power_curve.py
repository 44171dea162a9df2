"""Symmetric power curve around the midpoint of a module's range."""

from __future__ import annotations

import math

from ..core.exceptions import NoiseConfigError
from ..core.module import Module
from ..core.noise_util import map_range
from .base import Modifier


class PowerCurve(Modifier):
    """Pushes values away from (power > 1) or towards (power < 1) the midpoint.

    Distances from the child's midpoint are raised to ``power`` on either
    side, and the result is normalised to [0, 1] over the curved child
    bounds. Invalid ``pow`` inputs yield NaN rather than raising, and overflow
    yields inf. Curved bounds that are not finite are rejected.
    """

    def __init__(self, source: Module, power: float) -> None:
        super().__init__(source, 0.0, 1.0)
        low, high = source.min_value(), source.max_value()
        self.power = power
        self.mid = low + (high - low) / 2
        self.curve_min = self.mid - _pow(self.mid - low, power)
        self.curve_max = self.mid + _pow(high - self.mid, power)
        if not (math.isfinite(self.curve_min) and math.isfinite(self.curve_max)):
            raise NoiseConfigError(
                f"PowerCurve with power {power} over [{low}, {high}] has non-finite bounds"
            )

    def modify(self, x: float, y: float, value: float) -> float:
        if value >= self.mid:
            value = self.mid + _pow(value - self.mid, self.power)
        else:
            value = self.mid - _pow(self.mid - value, self.power)
        return map_range(value, self.curve_min, self.curve_max)


def _pow(base: float, exponent: float) -> float:
    try:
        result = base ** exponent
    except (ZeroDivisionError, OverflowError):
        return math.inf
    # a negative base with a fractional exponent gives a complex number
    return result if isinstance(result, float) else math.nan
