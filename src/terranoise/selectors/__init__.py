"""Control-driven selection and blending between modules."""

from .base import Selector
from .blend import Blend, Select
from .multi_blend import MultiBlend

__all__ = ["Selector", "Blend", "Select", "MultiBlend"]
