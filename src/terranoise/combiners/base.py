"""Base class for n-ary associative merges."""

from __future__ import annotations

from abc import abstractmethod

from ..core.exceptions import NoiseConfigError
from ..core.module import Module


class Combiner(Module):
    """Reduces the values of several child modules with one operator.

    Every child is evaluated on each query. Bounds are folded from the
    children's bounds once, at construction.
    """

    def __init__(self, *modules: Module) -> None:
        if not modules:
            raise NoiseConfigError(f"{self.__class__.__name__} needs at least one module")
        self.modules = tuple(modules)
        low, high = self.fold_bounds()
        super().__init__(low, high)

    def fold_bounds(self) -> tuple[float, float]:
        first = self.modules[0]
        low, high = first.min_value(), first.max_value()
        for module in self.modules[1:]:
            low = self.combine(low, module.min_value())
            high = self.combine(high, module.max_value())
        return low, high

    def evaluate(self, x: float, y: float) -> float:
        modules = self.modules
        total = modules[0].evaluate(x, y)
        for module in modules[1:]:
            total = self.combine(total, module.evaluate(x, y))
        return total

    @abstractmethod
    def combine(self, total: float, value: float) -> float:
        """Merge one more value into the running total."""
