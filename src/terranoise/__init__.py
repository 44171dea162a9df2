"""Composable, bound-aware 2D noise modules for terrain synthesis."""

import logging

from .core import CellFunc, DistanceFunc, EdgeFunc, Interpolation, Module, NoiseConfigError
from .sources import (
    Billow,
    Builder,
    Cell,
    CellEdge,
    Constant,
    Cubic,
    NoiseParams,
    Perlin,
    Rand,
    Ridge,
    Simplex,
    Sin,
    SourceType,
)
from .combiners import Add, Max, Min, Multiply
from .selectors import Blend, MultiBlend, Select
from .modifiers import Abs, Bias, Cache, Clamp, Invert, Map, PowerCurve, Scale, Turbulence, Warp
from .domain import AddWarp, CompoundWarp, Direct, DirectionWarp, Domain, DomainWarp
from .layout import GraphLoader
from .sampling import sample_grid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Module",
    "NoiseConfigError",
    "Interpolation",
    "CellFunc",
    "DistanceFunc",
    "EdgeFunc",
    "Builder",
    "NoiseParams",
    "SourceType",
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
    "Add",
    "Multiply",
    "Min",
    "Max",
    "Blend",
    "Select",
    "MultiBlend",
    "Abs",
    "Bias",
    "Scale",
    "Clamp",
    "Invert",
    "Map",
    "PowerCurve",
    "Cache",
    "Turbulence",
    "Warp",
    "Domain",
    "Direct",
    "DomainWarp",
    "DirectionWarp",
    "AddWarp",
    "CompoundWarp",
    "GraphLoader",
    "sample_grid",
]
