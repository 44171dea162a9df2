"""Concrete combiners: sum, product, minimum and maximum."""

from __future__ import annotations

from .base import Combiner


class Add(Combiner):
    """Sum of all children."""

    def combine(self, total: float, value: float) -> float:
        return total + value


class Multiply(Combiner):
    """Product of all children.

    Bounds use interval multiplication so that children spanning negative
    values produce correct extremes.
    """

    def fold_bounds(self) -> tuple[float, float]:
        first = self.modules[0]
        low, high = first.min_value(), first.max_value()
        for module in self.modules[1:]:
            products = (
                low * module.min_value(),
                low * module.max_value(),
                high * module.min_value(),
                high * module.max_value(),
            )
            low, high = min(products), max(products)
        return low, high

    def combine(self, total: float, value: float) -> float:
        return total * value


class Min(Combiner):
    """Smallest child value."""

    def combine(self, total: float, value: float) -> float:
        return min(total, value)


class Max(Combiner):
    """Largest child value."""

    def combine(self, total: float, value: float) -> float:
        return max(total, value)
