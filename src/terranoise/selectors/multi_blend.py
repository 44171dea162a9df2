"""N-way selector with soft transitions between neighbouring sources."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.exceptions import NoiseConfigError
from ..core.funcs import Interpolation
from ..core.module import Module
from ..core.noise_util import clamp
from .base import Selector


@dataclass(frozen=True)
class _Slot:
    """Portion of the control range where one source is used on its own."""

    source: Module
    center: float
    low: float
    high: float


class MultiBlend(Selector):
    """Partitions the control range into one equal cell per source.

    Cell i is centred on ``i/N + 1/(2N)``. Around every interior cell
    boundary there is a symmetric margin of half-width ``blend / (2N)``
    inside which the two neighbouring sources are blended linearly; outside
    the margins a single source is returned. ``blend == 0`` gives a hard
    select.

    Args:
        control: Module whose normalised value picks the cell
        *sources: Source modules, one per cell, in control order
        blend: Margin size as a fraction of the cell half-width, in [0, 1]
        interpolation: Curve applied to the blend factor (linear by default)
    """

    def __init__(
        self,
        control: Module,
        *sources: Module,
        blend: float = 0.5,
        interpolation: Interpolation | None = None,
    ) -> None:
        if not 0 <= blend <= 1:
            raise NoiseConfigError(f"blend must be within [0, 1], got {blend}")
        super().__init__(control, sources, interpolation)

        count = len(self.sources)
        radius = 1 / (2 * count)
        self.blend = blend
        self.margin = radius * blend
        self.max_index = count - 1

        core = radius - self.margin
        slots = []
        for i, source in enumerate(self.sources):
            center = i / count + 1 / (2 * count)
            low = 0.0 if i == 0 else center - core
            high = 1.0 if i == self.max_index else center + core
            slots.append(_Slot(source, center, low, high))
        self.slots = tuple(slots)

    def select_value(self, x: float, y: float, selector: float) -> float:
        if math.isnan(selector):
            return math.nan

        # nearest cell centre
        index = min(max(math.floor(selector * len(self.slots)), 0), self.max_index)
        slot = self.slots[index]
        if self.margin == 0:
            return slot.source.evaluate(x, y)

        if selector > slot.high:
            lower, upper = slot, self.slots[index + 1]
        elif selector < slot.low:
            lower, upper = self.slots[index - 1], slot
        else:
            return slot.source.evaluate(x, y)

        alpha = clamp((selector - lower.high) / (2 * self.margin), 0.0, 1.0)
        return self.blend_values(lower.source.evaluate(x, y), upper.source.evaluate(x, y), alpha)
