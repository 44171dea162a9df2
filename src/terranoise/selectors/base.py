"""Base class for control-driven choice between source modules."""

from __future__ import annotations

from abc import abstractmethod

from ..core.exceptions import NoiseConfigError
from ..core.funcs import Interpolation
from ..core.module import Module
from ..core.noise_util import clamp, map_range


class Selector(Module):
    """Picks or blends among ``sources`` based on a control module.

    The control value is normalised to [0, 1] across the control's own
    bounds before it is handed to ``select_value``. Blending is convex, so
    the selector's bounds span the sources' bounds.
    """

    def __init__(
        self,
        control: Module,
        sources: tuple[Module, ...],
        interpolation: Interpolation | None = None,
    ) -> None:
        if not sources:
            raise NoiseConfigError(f"{self.__class__.__name__} needs at least one source")
        super().__init__(
            min(source.min_value() for source in sources),
            max(source.max_value() for source in sources),
        )
        self.control = control
        self.sources = tuple(sources)
        self.interpolation = Interpolation.LINEAR if interpolation is None else interpolation

    def evaluate(self, x: float, y: float) -> float:
        value = self.control.evaluate(x, y)
        selector = map_range(value, self.control.min_value(), self.control.max_value())
        return self.select_value(x, y, selector)

    @abstractmethod
    def select_value(self, x: float, y: float, selector: float) -> float:
        """Produce the output for a normalised control value in [0, 1]."""

    def blend_values(self, lower: float, upper: float, alpha: float) -> float:
        alpha = self.interpolation.apply(alpha)
        return clamp(lower + alpha * (upper - lower), min(lower, upper), max(lower, upper))
