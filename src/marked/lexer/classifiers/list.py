"""List marker classifier mixin."""

from __future__ import annotations

from marked.parsing.charsets import (
    INLINE_WHITESPACE,
    ORDERED_LIST_DELIMITERS,
    UNORDERED_LIST_MARKERS,
)
from marked.parsing.numbering import is_marker_body
from marked.tokens import Line, Token, TokenType

# Widest gap after a marker that still counts towards the content indent.
# A wider gap keeps one column and leaves the rest as leading content.
MAX_MARKER_GAP = 4


class ListClassifierMixin:
    """Mixin providing list marker classification.

    Recognised markers:
    - unordered: ``-``, ``*``, ``+``
    - ordered: a body of 1-9 digits, a single letter or a roman numeral,
      followed by ``.`` or ``)``

    A marker must be followed by whitespace or the end of the line.
    """

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        line: Line,
        *,
        line_indent: int = 0,
        marker: str = "",
        content_indent: int = 0,
    ) -> Token:
        """Create token for a line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_marker(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        """Try to classify content as list item marker.

        Args:
            content: Line content with leading whitespace stripped
            line: The line being classified
            indent: Column width of the whitespace before the marker

        Returns:
            LIST_ITEM_MARKER token with the marker, the text after it and
            the item's content indent, or None.
        """
        if not content:
            return None

        if content[0] in UNORDERED_LIST_MARKERS:
            marker_len = 1
        else:
            pos = 0
            while pos < len(content) and content[pos].isascii() and content[pos].isalnum():
                pos += 1
            if pos == len(content) or content[pos] not in ORDERED_LIST_DELIMITERS:
                return None
            if not is_marker_body(content[:pos]):
                return None
            marker_len = pos + 1

        rest = content[marker_len:]
        if rest and rest[0] not in INLINE_WHITESPACE:
            return None

        marker_col = indent + marker_len
        gap, text = _measure_gap(rest, marker_col)

        if not text:
            content_indent = marker_col + 1
            value = ""
        elif gap > MAX_MARKER_GAP:
            content_indent = marker_col + 1
            value = " " * (gap - 1) + text
        else:
            content_indent = marker_col + gap
            value = text

        return self._make_token(
            TokenType.LIST_ITEM_MARKER,
            value,
            line,
            line_indent=indent,
            marker=content[:marker_len],
            content_indent=content_indent,
        )


def _measure_gap(rest: str, start_col: int) -> tuple[int, str]:
    """Width of the whitespace run at the start of ``rest``.

    Tabs advance to the next multiple of 4 counted from ``start_col``.

    Returns:
        (gap_columns, text_after_gap)
    """
    col = start_col
    pos = 0
    while pos < len(rest) and rest[pos] in INLINE_WHITESPACE:
        col = col + 4 - (col % 4) if rest[pos] == "\t" else col + 1
        pos += 1
    return col - start_col, rest[pos:].rstrip()
