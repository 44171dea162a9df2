"""Two-source selectors: soft blend and hard switch."""

from __future__ import annotations

import math

from ..core.exceptions import NoiseConfigError
from ..core.funcs import Interpolation
from ..core.module import Module
from .base import Selector


class Blend(Selector):
    """Blends ``lower`` into ``upper`` across a window of the control range.

    Args:
        control: Module whose normalised value drives the blend
        lower: Returned below the window
        upper: Returned above the window
        midpoint: Centre of the window in normalised control units
        blend_range: Width of the window; 0 makes a hard switch at midpoint
        interpolation: Curve applied to the blend factor (linear by default)
    """

    def __init__(
        self,
        control: Module,
        lower: Module,
        upper: Module,
        midpoint: float = 0.5,
        blend_range: float = 0.2,
        interpolation: Interpolation | None = None,
    ) -> None:
        if blend_range < 0:
            raise NoiseConfigError(f"blend_range must be >= 0, got {blend_range}")
        super().__init__(control, (lower, upper), interpolation)
        self.lower = lower
        self.upper = upper
        self.midpoint = midpoint
        self.blend_range = blend_range
        self.blend_lower = midpoint - blend_range / 2
        self.blend_upper = midpoint + blend_range / 2

    def select_value(self, x: float, y: float, selector: float) -> float:
        if math.isnan(selector):
            return math.nan
        if self.blend_range == 0:
            source = self.lower if selector < self.midpoint else self.upper
            return source.evaluate(x, y)
        if selector <= self.blend_lower:
            return self.lower.evaluate(x, y)
        if selector >= self.blend_upper:
            return self.upper.evaluate(x, y)
        alpha = (selector - self.blend_lower) / self.blend_range
        return self.blend_values(self.lower.evaluate(x, y), self.upper.evaluate(x, y), alpha)


class Select(Selector):
    """Hard switch: ``lower`` below ``threshold``, ``upper`` at or above it."""

    def __init__(self, control: Module, lower: Module, upper: Module, threshold: float = 0.5) -> None:
        super().__init__(control, (lower, upper))
        self.lower = lower
        self.upper = upper
        self.threshold = threshold

    def select_value(self, x: float, y: float, selector: float) -> float:
        if math.isnan(selector):
            return math.nan
        if selector < self.threshold:
            return self.lower.evaluate(x, y)
        return self.upper.evaluate(x, y)
