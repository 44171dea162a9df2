"""Core noise graph components."""

from .exceptions import NoiseConfigError
from .funcs import CellFunc, DistanceFunc, EdgeFunc, Interpolation
from .module import Module
from . import noise_util

__all__ = [
    "Module",
    "NoiseConfigError",
    "Interpolation",
    "CellFunc",
    "DistanceFunc",
    "EdgeFunc",
    "noise_util",
]
