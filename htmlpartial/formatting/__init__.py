"""Whitespace normalization before scanning and pretty-printing after resolution."""

from .normalize import normalize_tags
from .pretty import pretty_print

__all__ = ['normalize_tags', 'pretty_print']
