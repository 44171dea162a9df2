"""Coordinate transforms used to warp the input space of a module."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..core.module import Module
from ..core.noise_util import map_range


class Domain(ABC):
    """Maps a coordinate to a displaced coordinate.

    Subclasses provide per-axis offsets; ``get_x``/``get_y`` return the
    displaced position. Domains hold no value semantics and no state.
    """

    @abstractmethod
    def offset_x(self, x: float, y: float) -> float:
        """Displacement applied to x."""

    @abstractmethod
    def offset_y(self, x: float, y: float) -> float:
        """Displacement applied to y."""

    def get_x(self, x: float, y: float) -> float:
        return x + self.offset_x(x, y)

    def get_y(self, x: float, y: float) -> float:
        return y + self.offset_y(x, y)

    def then(self, other: Domain) -> Domain:
        """Apply this domain first and feed its output into ``other``."""
        return CompoundWarp(self, other)

    def add(self, other: Domain) -> Domain:
        """Sum the offsets of this domain and ``other`` at the same input."""
        return AddWarp(self, other)


class Direct(Domain):
    """Identity transform."""

    def offset_x(self, x: float, y: float) -> float:
        return 0.0

    def offset_y(self, x: float, y: float) -> float:
        return 0.0


class DomainWarp(Domain):
    """Displaces each axis by its own module, centred on the module's midpoint.

    A module value at its lower bound shifts by ``-strength`` and at its
    upper bound by ``+strength``.
    """

    def __init__(self, x: Module, y: Module, strength: float) -> None:
        self.x = x
        self.y = y
        self.strength = strength

    @classmethod
    def from_builder(
        cls,
        kind: str = "perlin",
        seed: int = 1337,
        frequency: float = 0.01,
        octaves: int = 1,
        strength: float = 1.0,
    ) -> DomainWarp:
        """Create a warp from two generators of one family seeded seed and seed + 1."""
        from ..sources.builder import Builder

        builder = Builder(seed=seed, frequency=frequency, octaves=octaves)
        x = builder.build(kind)
        builder.seed += 1
        return cls(x, builder.build(kind), strength)

    def offset_x(self, x: float, y: float) -> float:
        return _centred(self.x, x, y) * self.strength

    def offset_y(self, x: float, y: float) -> float:
        return _centred(self.y, x, y) * self.strength


class DirectionWarp(Domain):
    """Displaces along an angle picked by one module by a distance from another.

    The direction module's range covers one full turn.
    """

    def __init__(self, direction: Module, strength: Module) -> None:
        self.direction = direction
        self.strength = strength

    def _angle(self, x: float, y: float) -> float:
        value = self.direction.evaluate(x, y)
        return map_range(value, self.direction.min_value(), self.direction.max_value()) * math.tau

    def offset_x(self, x: float, y: float) -> float:
        return math.cos(self._angle(x, y)) * self.strength.evaluate(x, y)

    def offset_y(self, x: float, y: float) -> float:
        return math.sin(self._angle(x, y)) * self.strength.evaluate(x, y)


class AddWarp(Domain):
    """Sum of two domains' offsets."""

    def __init__(self, a: Domain, b: Domain) -> None:
        self.a = a
        self.b = b

    def offset_x(self, x: float, y: float) -> float:
        return self.a.offset_x(x, y) + self.b.offset_x(x, y)

    def offset_y(self, x: float, y: float) -> float:
        return self.a.offset_y(x, y) + self.b.offset_y(x, y)


class CompoundWarp(Domain):
    """Chains two domains: ``b`` is evaluated at the output of ``a``."""

    def __init__(self, a: Domain, b: Domain) -> None:
        self.a = a
        self.b = b

    def get_x(self, x: float, y: float) -> float:
        return self.b.get_x(self.a.get_x(x, y), self.a.get_y(x, y))

    def get_y(self, x: float, y: float) -> float:
        return self.b.get_y(self.a.get_x(x, y), self.a.get_y(x, y))

    def offset_x(self, x: float, y: float) -> float:
        return self.get_x(x, y) - x

    def offset_y(self, x: float, y: float) -> float:
        return self.get_y(x, y) - y


def _centred(module: Module, x: float, y: float) -> float:
    # [min, max] -> [-1, 1]; a constant module does not displace
    low, high = module.min_value(), module.max_value()
    if high <= low:
        return 0.0
    return map_range(module.evaluate(x, y), low, high) * 2.0 - 1.0
