"""Arithmetic transforms with exact bounds derived from the child's bounds."""

from __future__ import annotations

from ..core.exceptions import NoiseConfigError
from ..core.module import Module
from ..core.noise_util import clamp, map_range
from .base import Modifier


class Abs(Modifier):
    """Absolute value."""

    def __init__(self, source: Module) -> None:
        low, high = source.min_value(), source.max_value()
        if low >= 0:
            bounds = (low, high)
        elif high <= 0:
            bounds = (-high, -low)
        else:
            bounds = (0.0, max(-low, high))
        super().__init__(source, *bounds)

    def modify(self, x: float, y: float, value: float) -> float:
        return abs(value)


class Bias(Modifier):
    """Adds a fixed offset."""

    def __init__(self, source: Module, amount: float) -> None:
        super().__init__(source, source.min_value() + amount, source.max_value() + amount)
        self.amount = amount

    def modify(self, x: float, y: float, value: float) -> float:
        return value + self.amount


class Scale(Modifier):
    """Multiplies by a fixed factor; a negative factor swaps the bounds."""

    def __init__(self, source: Module, factor: float) -> None:
        a = source.min_value() * factor
        b = source.max_value() * factor
        super().__init__(source, min(a, b), max(a, b))
        self.factor = factor

    def modify(self, x: float, y: float, value: float) -> float:
        return value * self.factor


class Clamp(Modifier):
    """Limits output to [low, high]."""

    def __init__(self, source: Module, low: float, high: float) -> None:
        if low > high:
            raise NoiseConfigError(f"Clamp range is inverted: [{low}, {high}]")
        super().__init__(
            source,
            clamp(source.min_value(), low, high),
            clamp(source.max_value(), low, high),
        )
        self.low = low
        self.high = high

    def modify(self, x: float, y: float, value: float) -> float:
        return clamp(value, self.low, self.high)


class Invert(Modifier):
    """Mirrors the value within the child's own range."""

    def modify(self, x: float, y: float, value: float) -> float:
        return clamp(self.max_value() + self.min_value() - value, self.min_value(), self.max_value())


class Map(Modifier):
    """Affinely remaps the child's range onto [low, high]."""

    def __init__(self, source: Module, low: float, high: float) -> None:
        if low > high:
            raise NoiseConfigError(f"Map range is inverted: [{low}, {high}]")
        super().__init__(source, low, high)
        self.low = low
        self.high = high

    def modify(self, x: float, y: float, value: float) -> float:
        t = map_range(value, self.source.min_value(), self.source.max_value())
        return clamp(self.low + t * (self.high - self.low), self.low, self.high)
