"""
Variable substitution implementation.
Handles literal ``<prefix><name>`` placeholders, e.g. ``@@title``.
"""

import re
from typing import Dict, Iterable, Optional, Pattern

from htmlpartial.scanner.attributes import Attribute


class VariableSubstitutor:
    """
    Replaces variable placeholders in loaded partial content.

    Placeholders are matched verbatim and case-sensitively; there is no
    escape syntax. All substitutions happen in a single pass, so a value
    that itself contains a placeholder is inserted as-is.
    """

    def __init__(self, prefix: str = '@@'):
        """Initialize the substitutor.

        Args:
            prefix: Marker that precedes each variable name
        """
        self.prefix = prefix

    def substitute(self, content: Optional[str], attributes: Iterable[Attribute]) -> str:
        """
        Substitute every placeholder for each attribute.

        Args:
            content: Partial content; None is treated as empty
            attributes: Variable attributes (anything but 'src')

        Returns:
            Content with placeholders replaced
        """
        text = content or ''
        variables = self.build_variables(attributes)
        if not text or not variables:
            return text

        pattern = self._placeholder_pattern(variables)

        def replace_var(match):
            return variables[match.group(0)[len(self.prefix):]]

        return pattern.sub(replace_var, text)

    def build_variables(self, attributes: Iterable[Attribute]) -> Dict[str, str]:
        """
        Map variable names to values.

        The first attribute wins when a key is repeated.
        """
        variables: Dict[str, str] = {}
        for attribute in attributes:
            variables.setdefault(attribute.key, attribute.value)
        return variables

    def _placeholder_pattern(self, variables: Dict[str, str]) -> Pattern:
        # Longest names first so @@titleText is not consumed as @@title + "Text"
        names = sorted(variables, key=len, reverse=True)
        alternatives = '|'.join(re.escape(self.prefix + name) for name in names)
        return re.compile(alternatives)
