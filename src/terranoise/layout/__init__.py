"""Data-driven graph construction from YAML."""

from .loader import GraphLoader, parse_enum

__all__ = ["GraphLoader", "parse_enum"]
