"""N-ary merges over sibling modules."""

from .base import Combiner
from .ops import Add, Max, Min, Multiply

__all__ = ["Combiner", "Add", "Multiply", "Min", "Max"]
