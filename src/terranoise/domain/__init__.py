"""Coordinate transforms for domain warping."""

from .base import AddWarp, CompoundWarp, Direct, DirectionWarp, Domain, DomainWarp

__all__ = ["Domain", "Direct", "DomainWarp", "DirectionWarp", "AddWarp", "CompoundWarp"]
