"""Partial loading and recursive resolution module."""

from .loader import SourceLoader
from .engine import PartialResolver, ResolutionResult

__all__ = [
    "SourceLoader",
    "PartialResolver",
    "ResolutionResult",
]
