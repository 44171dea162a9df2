"""Evaluate a module through a coordinate transform."""

from __future__ import annotations

from ..core.module import Module
from ..domain.base import Domain
from .base import Modifier


class Warp(Modifier):
    """Samples ``source`` at the coordinate produced by ``domain``."""

    def __init__(self, source: Module, domain: Domain) -> None:
        super().__init__(source)
        self.domain = domain

    def evaluate(self, x: float, y: float) -> float:
        return self.source.evaluate(self.domain.get_x(x, y), self.domain.get_y(x, y))
