"""Partial tag discovery."""

import re
from dataclasses import dataclass
from typing import List

from .attributes import Attribute, parse_attributes


@dataclass(frozen=True)
class TagOccurrence:
    """One textual match of a partial tag.

    Attributes:
        text: The exact matched substring; replacement is keyed on it
        attributes_text: Raw text between the tag name and the tag end
        closed: True for ``<tag ...>...</tag>``, False for ``<tag .../>``
    """
    text: str
    attributes_text: str
    closed: bool = False

    @property
    def attributes(self) -> List[Attribute]:
        return parse_attributes(self.attributes_text)


class TagScanner:
    """Finds closed and self-closing partial tags in a document.

    The closed form matches non-greedily: the span ends at the nearest
    closing tag, so a same-name tag inside the body is not paired with
    an outer closing tag. Body content, including any partial tags in it,
    is ignored.
    """

    def __init__(self, tag_name: str = 'partial'):
        self.tag_name = tag_name
        name = re.escape(tag_name)
        self.closed_pattern = re.compile(
            rf'<{name}(?=[\s/>])(?P<attrs>[^>]*?)(?<!/)>.*?</{name}\s*>',
            re.DOTALL
        )
        self.self_closing_pattern = re.compile(
            rf'<{name}(?=[\s/])(?P<attrs>[^>]*?)/>'
        )

    def scan(self, text: str) -> List[TagOccurrence]:
        """Return closed-tag matches followed by self-closing matches.

        Self-closing tags inside a closed tag's body are part of that
        body and are not returned.
        """
        closed_matches = list(self.closed_pattern.finditer(text))
        bodies = [m.span() for m in closed_matches]

        closed = [
            TagOccurrence(text=m.group(0), attributes_text=m.group('attrs'), closed=True)
            for m in closed_matches
        ]
        self_closing = [
            TagOccurrence(text=m.group(0), attributes_text=m.group('attrs'))
            for m in self.self_closing_pattern.finditer(text)
            if not any(start < m.start() and m.end() <= end for start, end in bodies)
        ]
        return closed + self_closing
