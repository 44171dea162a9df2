"""Base class for every node of a noise graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from ..domain.base import Domain
    from .funcs import Interpolation


class Module(ABC):
    """A pure function from a 2D coordinate to a bounded float.

    Bounds are fixed when the module is constructed and are derived from its
    parameters and children, never by sampling. Every subclass guarantees
    ``min_value() <= evaluate(x, y) <= max_value()`` for finite coordinates.

    The composition helpers below never mutate the receiver; each one wraps it
    in a new node, so modules can be freely shared between graphs.

    Example:
        elevation = Builder(seed=7).perlin()
        hills = Builder(seed=8, octaves=4).ridge()
        terrain = elevation.blend(elevation.curve(1.5), hills, range=0.3)
    """

    def __init__(self, min_value: float, max_value: float) -> None:
        self._min_value = min_value
        self._max_value = max_value

    @abstractmethod
    def evaluate(self, x: float, y: float) -> float:
        """Evaluate the module at (x, y)."""

    def min_value(self) -> float:
        """Lowest value ``evaluate`` can return."""
        return self._min_value

    def max_value(self) -> float:
        """Highest value ``evaluate`` can return."""
        return self._max_value

    # Single-input transforms

    def abs(self) -> Module:
        from ..modifiers.simple import Abs
        return Abs(self)

    def bias(self, amount: float) -> Module:
        from ..modifiers.simple import Bias
        return Bias(self, amount)

    def scale(self, factor: float) -> Module:
        from ..modifiers.simple import Scale
        return Scale(self, factor)

    def clamp(self, low: float, high: float) -> Module:
        from ..modifiers.simple import Clamp
        return Clamp(self, low, high)

    def invert(self) -> Module:
        from ..modifiers.simple import Invert
        return Invert(self)

    def map(self, low: float, high: float) -> Module:
        from ..modifiers.simple import Map
        return Map(self, low, high)

    def norm(self) -> Module:
        """Remap this module's bounds onto [0, 1]."""
        return self.map(0.0, 1.0)

    def curve(self, power: float) -> Module:
        from ..modifiers.power_curve import PowerCurve
        return PowerCurve(self, power)

    def cache(self) -> Module:
        from ..modifiers.cache import Cache
        return Cache(self)

    def warp(self, domain: Domain) -> Module:
        from ..modifiers.warp import Warp
        return Warp(self, domain)

    def turbulence(
        self,
        seed: int = 1337,
        frequency: float = 0.01,
        octaves: int = 1,
        power: float = 1.0,
    ) -> Module:
        from ..modifiers.turbulence import Turbulence
        return Turbulence.from_params(self, seed=seed, frequency=frequency, octaves=octaves, power=power)

    # Combiners

    def add(self, *others: Module) -> Module:
        from ..combiners import Add
        return Add(self, *others)

    def mult(self, *others: Module) -> Module:
        from ..combiners import Multiply
        return Multiply(self, *others)

    def min(self, *others: Module) -> Module:
        from ..combiners import Min
        return Min(self, *others)

    def max(self, *others: Module) -> Module:
        from ..combiners import Max
        return Max(self, *others)

    # Selectors (this module is the control)

    def blend(
        self,
        lower: Module,
        upper: Module,
        midpoint: float = 0.5,
        range: float = 0.2,
        interpolation: Interpolation | None = None,
    ) -> Module:
        from ..selectors import Blend
        return Blend(self, lower, upper, midpoint=midpoint, blend_range=range, interpolation=interpolation)

    def select(self, lower: Module, upper: Module, threshold: float = 0.5) -> Module:
        from ..selectors import Select
        return Select(self, lower, upper, threshold=threshold)

    def multi_blend(
        self,
        *sources: Module,
        blend: float = 0.5,
        interpolation: Interpolation | None = None,
    ) -> Module:
        from ..selectors import MultiBlend
        return MultiBlend(self, *sources, blend=blend, interpolation=interpolation)

    def sample(
        self,
        width: int,
        height: int,
        x: float = 0.0,
        y: float = 0.0,
        step: float = 1.0,
    ) -> NDArray[np.float64]:
        """Evaluate a regular grid of points; see ``terranoise.sampling``."""
        from ..sampling import sample_grid
        return sample_grid(self, width, height, x=x, y=y, step=step)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(min={self._min_value:.4g}, max={self._max_value:.4g})"
