"""Single-input transforms."""

from .base import Modifier
from .cache import Cache
from .power_curve import PowerCurve
from .simple import Abs, Bias, Clamp, Invert, Map, Scale
from .turbulence import Turbulence
from .warp import Warp

__all__ = [
    "Modifier",
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
]
