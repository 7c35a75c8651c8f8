"""HTML pretty printer.

Reflows indentation only. Tag text is emitted exactly as written, text
nodes have runs of whitespace collapsed to one space, and the content of
raw-text elements (pre, textarea, script, style) is left untouched.
"""

import re
from typing import List

TOKEN_PATTERN = re.compile(
    r'(?P<comment><!--.*?-->)'
    r'|(?P<declaration><![^>]*>|<\?.*?\?>)'
    r'|(?P<tag></?[A-Za-z][^>]*>)'
    r'|(?P<text>[^<]+|<)',
    re.DOTALL
)
TAG_NAME_PATTERN = re.compile(r'</?([A-Za-z][^\s/>]*)')
# HTML whitespace only; U+00A0 and other Unicode spaces are text
HTML_WHITESPACE = ' \t\n\r\f'
WHITESPACE_PATTERN = re.compile(r'[ \t\n\r\f]+')

VOID_ELEMENTS = frozenset([
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
])

INLINE_ELEMENTS = frozenset([
    'a', 'abbr', 'b', 'bdi', 'bdo', 'br', 'cite', 'code', 'data', 'dfn',
    'em', 'i', 'img', 'input', 'kbd', 'label', 'mark', 'q', 's', 'samp',
    'small', 'span', 'strong', 'sub', 'sup', 'time', 'u', 'var', 'wbr',
])

RAW_TEXT_ELEMENTS = frozenset(['pre', 'textarea', 'script', 'style'])


def pretty_print(html: str, indent: str = '  ') -> str:
    """Reindent an HTML document by nesting depth.

    Args:
        html: Document text
        indent: Whitespace for one nesting level

    Returns:
        The reflowed document, newline terminated, or '' for blank input
    """
    lines: List[str] = []
    inline: List[str] = []
    depth = 0

    def flush():
        run = ''.join(inline).strip(HTML_WHITESPACE)
        inline.clear()
        if run:
            lines.append(indent * depth + run)

    pos = 0
    while pos < len(html):
        match = TOKEN_PATTERN.match(html, pos)
        token = match.group(0)
        pos = match.end()

        if match.group('text') is not None:
            _append_text(inline, WHITESPACE_PATTERN.sub(' ', token))
            continue

        if match.group('tag') is None:
            flush()
            lines.append(indent * depth + token)
            continue

        name = TAG_NAME_PATTERN.match(token).group(1).lower()
        closing = token.startswith('</')
        empty = token.endswith('/>') or name in VOID_ELEMENTS

        if name in INLINE_ELEMENTS:
            inline.append(token)
        elif closing:
            flush()
            depth = max(depth - 1, 0)
            lines.append(indent * depth + token)
        elif name in RAW_TEXT_ELEMENTS and not empty:
            flush()
            end = re.compile(rf'</{re.escape(name)}\s*>', re.IGNORECASE).search(html, pos)
            stop = end.end() if end else len(html)
            lines.append(indent * depth + token + html[pos:stop])
            pos = stop
        else:
            flush()
            lines.append(indent * depth + token)
            if not empty:
                depth += 1

    flush()
    return '\n'.join(lines) + '\n' if lines else ''


def _append_text(inline: List[str], text: str):
    if inline and inline[-1].endswith(' ') and text.startswith(' '):
        text = text[1:]
    if text:
        inline.append(text)
