"""Attribute extraction from a single partial tag."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Attribute:
    """One key/value pair, as written in the tag."""
    key: str
    value: str


# key=value, value double quoted, single quoted or bare. A bare value may
# contain spaces but ends where the next "name=" starts.
ATTRIBUTE_PATTERN = re.compile(r'''
    (?P<key>[^\s=<>"'/]+)
    \s*=\s*
    (?:
        "(?P<double>[^"]*)"
      | '(?P<single>[^']*)'
      | (?P<bare>(?:(?!\s+[^\s=<>"'/]+\s*=)[^"'<>])+)
    )
''', re.VERBOSE)


def parse_attributes(attributes_text: str) -> List[Attribute]:
    """Extract attributes in source order.

    Segments that do not look like ``key=value`` (a bare word, an
    unterminated quote) are skipped.

    Args:
        attributes_text: Everything between the tag name and the tag end

    Returns:
        Attributes in the order they appear
    """
    attributes = []

    for match in ATTRIBUTE_PATTERN.finditer(attributes_text):
        if match.group('double') is not None:
            value = match.group('double')
        elif match.group('single') is not None:
            value = match.group('single')
        else:
            value = match.group('bare').rstrip()
        attributes.append(Attribute(key=match.group('key'), value=value))

    return attributes


def partition_attributes(attributes: List[Attribute]) -> Tuple[Optional[Attribute], List[Attribute]]:
    """Split attributes into the first 'src' and the substitution variables.

    Additional 'src' attributes are dropped; they are neither the source
    nor variables.
    """
    source = None
    variables = []

    for attribute in attributes:
        if attribute.key == 'src':
            if source is None:
                source = attribute
        else:
            variables.append(attribute)

    return source, variables
