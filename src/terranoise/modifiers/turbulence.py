"""Domain-warping by two independent noise fields."""

from __future__ import annotations

from ..core.module import Module
from .base import Modifier

# Fixed sub-unit phase shifts that decorrelate the x and y displacement fields
X0_OFFSET = (12414.0 / 65536.0, 31337.0 / 65536.0)
X1_OFFSET = (53820.0 / 65536.0, 44845.0 / 65536.0)


class Turbulence(Modifier):
    """Evaluates the source at a coordinate displaced by two noise fields.

    x is displaced by ``turb0`` and y by ``turb1``, each sampled at a
    different fixed phase offset and scaled by ``power``. With ``power == 0``
    the source is evaluated at the unmodified coordinate.

    Args:
        source: Module to evaluate at the displaced coordinate
        turb0: Field driving the x displacement
        turb1: Field driving the y displacement
        power: Displacement strength in input units
    """

    def __init__(self, source: Module, turb0: Module, turb1: Module, power: float) -> None:
        super().__init__(source)
        self.turb0 = turb0
        self.turb1 = turb1
        self.power = power

    @classmethod
    def from_params(
        cls,
        source: Module,
        seed: int = 1337,
        frequency: float = 0.01,
        octaves: int = 1,
        power: float = 1.0,
    ) -> Turbulence:
        """Build the two displacement fields as Perlin noise seeded seed and seed + 1."""
        from ..sources.builder import Builder

        builder = Builder(seed=seed, frequency=frequency, octaves=octaves, source=source, power=power)
        return builder.turbulence()

    def evaluate(self, x: float, y: float) -> float:
        dx = self.turb0.evaluate(x + X0_OFFSET[0], y + X0_OFFSET[1]) * self.power
        dy = self.turb1.evaluate(x + X1_OFFSET[0], y + X1_OFFSET[1]) * self.power
        return self.source.evaluate(x + dx, y + dy)
