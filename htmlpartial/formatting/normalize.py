"""Pre-scan whitespace normalization."""

import re

LINE_BREAK_PATTERN = re.compile(r'\r?\n|\r')


def normalize_tags(text: str, tag_name: str = 'partial') -> str:
    """Put every partial tag on a line of its own.

    Line breaks are collapsed to spaces first, so a tag written across
    several lines becomes a single line; then a line break goes before
    each opening tag and after each closing tag.

    Args:
        text: Document text
        tag_name: Partial element name

    Returns:
        Normalized text
    """
    content = LINE_BREAK_PATTERN.sub(' ', text)
    content = content.replace(f'<{tag_name}', f'\n<{tag_name}')
    content = content.replace(f'</{tag_name}>', f'</{tag_name}>\n')
    return content
