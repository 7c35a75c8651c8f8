"""
Tag and attribute discovery.
Regex based; the resolver only depends on ``TagScanner.scan``.
"""

from .attributes import Attribute, parse_attributes, partition_attributes
from .tags import TagOccurrence, TagScanner

__all__ = [
    'Attribute',
    'parse_attributes',
    'partition_attributes',
    'TagOccurrence',
    'TagScanner',
]
