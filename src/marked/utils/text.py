"""Text helpers shared by the lexer, parser and renderers."""

from __future__ import annotations

import html as html_module


def html_escape(text: str) -> str:
    """Escape text for HTML content and double-quoted attribute values.

    Converts &, <, > and " to entities. Single quotes are left alone since
    renderers only emit double-quoted attributes.

    Examples:
        >>> html_escape('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def expand_indent(text: str, tab_width: int = 4) -> tuple[int, int]:
    """Measure leading whitespace.

    Spaces count as 1, tabs advance to the next multiple of ``tab_width``.

    Returns:
        (indent_columns, content_start_index)
    """
    indent = 0
    pos = 0
    text_len = len(text)
    while pos < text_len:
        char = text[pos]
        if char == " ":
            indent += 1
        elif char == "\t":
            indent += tab_width - (indent % tab_width)
        else:
            break
        pos += 1
    return indent, pos


def has_indent(text: str, count: int, tab_width: int = 4) -> bool:
    """Check if ``text`` starts with at least ``count`` columns of whitespace.

    Scans no further than ``count`` columns, so deeply indented lines cost
    no more than shallow ones.

    Examples:
        >>> has_indent("\\t- x", 4)
        True
        >>> has_indent("   x", 4)
        False
    """
    col = 0
    for char in text:
        if col >= count:
            return True
        if char == " ":
            col += 1
        elif char == "\t":
            col += tab_width - (col % tab_width)
        else:
            break
    return col >= count


def strip_columns(text: str, count: int, tab_width: int = 4) -> str:
    """Strip up to ``count`` columns of leading whitespace.

    A tab straddling the boundary is split: the columns it covers beyond
    ``count`` are kept as spaces.
    """
    col = 0
    pos = 0
    while pos < len(text) and col < count:
        char = text[pos]
        if char == " ":
            col += 1
            pos += 1
        elif char == "\t":
            expansion = tab_width - (col % tab_width)
            if col + expansion <= count:
                col += expansion
                pos += 1
            else:
                needed = count - col
                return " " * (expansion - needed) + text[pos + 1 :]
        else:
            break
    return text[pos:]
