"""Leaf noise generators and the builder that configures them."""

from .base import FractalSource, NoiseSource
from .builder import Builder
from .cell import Cell, CellEdge
from .cubic import Cubic
from .misc import Constant, Rand, Sin
from .params import NoiseParams, SourceType
from .perlin import Billow, Perlin, Ridge
from .simplex import Simplex

__all__ = [
    "Builder",
    "NoiseParams",
    "SourceType",
    "NoiseSource",
    "FractalSource",
    "Perlin",
    "Ridge",
    "Billow",
    "Simplex",
    "Cubic",
    "Cell",
    "CellEdge",
    "Sin",
    "Rand",
    "Constant",
]
