"""Base class for single-input transforms."""

from __future__ import annotations

from ..core.module import Module


class Modifier(Module):
    """Wraps exactly one module and transforms its output.

    Subclasses implement ``modify``; by default the bounds are the child's.
    """

    def __init__(self, source: Module, min_value: float | None = None, max_value: float | None = None) -> None:
        super().__init__(
            source.min_value() if min_value is None else min_value,
            source.max_value() if max_value is None else max_value,
        )
        self.source = source

    def evaluate(self, x: float, y: float) -> float:
        return self.modify(x, y, self.source.evaluate(x, y))

    def modify(self, x: float, y: float, value: float) -> float:
        return value
