"""List parsing for the Marked parser.

A list is a run of items whose markers agree: the same bullet for
unordered lists; for ordered lists the same delimiter and a marker body
that fits the numbering style inferred from the first item(s). An item
that does not agree starts a new sibling list.

Each item owns its marker line plus the following lines that are blank
or indented at least to the item's content indent. Those lines lose
exactly that many columns and are parsed as a nested document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marked.nodes import Block, List, ListItem, ListStyle
from marked.parsing.charsets import ORDERED_LIST_DELIMITERS
from marked.parsing.numbering import (
    classify_list_style,
    marker_fits_style,
    marker_ordinal,
)
from marked.tokens import Line, Token, TokenType
from marked.utils.text import has_indent, strip_columns

if TYPE_CHECKING:
    from marked.lexer import Lexer
    from marked.location import SourceLocation


def split_marker(marker: str) -> tuple[bool, str, str]:
    """Split a list marker into (ordered, body, bullet_or_delimiter).

    Examples:
        >>> split_marker("-")
        (False, '', '-')
        >>> split_marker("iv)")
        (True, 'iv', ')')
    """
    if marker[-1] in ORDERED_LIST_DELIMITERS:
        return True, marker[:-1], marker[-1]
    return False, "", marker


class ListParsingMixin:
    """List parsing methods.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token

    Required Host Methods:
        - _advance() -> Token
        - _location(token, end_lineno) -> SourceLocation
        - _parse_nested(lines) -> tuple[Block, ...]

    """

    _lexer: Lexer
    _current: Token

    def _advance(self) -> Token:
        raise NotImplementedError

    def _location(self, token: Token, end_lineno: int | None = None) -> SourceLocation:
        raise NotImplementedError

    def _parse_nested(self, lines: list[Line]) -> tuple[Block, ...]:
        raise NotImplementedError

    def _parse_list(self) -> List:
        """Parse a list starting at the current LIST_ITEM_MARKER token."""
        first = self._current
        ordered, first_body, marker = split_marker(first.marker)

        items = [self._parse_list_item()]

        style = ListStyle.NONE
        start = 1
        if ordered:
            bodies = [first_body]
            following = self._current
            if following.type == TokenType.LIST_ITEM_MARKER:
                next_ordered, next_body, next_marker = split_marker(following.marker)
                if next_ordered and next_marker == marker:
                    bodies.append(next_body)
            style = classify_list_style(bodies)
            start = marker_ordinal(first_body, style)

        while self._continues_list(ordered, marker, style):
            items.append(self._parse_list_item())

        return List(
            location=self._location(first, items[-1].location.end_lineno),
            items=tuple(items),
            ordered=ordered,
            style=style,
            start=start,
            marker=marker,
        )

    def _continues_list(self, ordered: bool, marker: str, style: ListStyle) -> bool:
        """Check if the current token is another item of the open list."""
        token = self._current
        if token.type != TokenType.LIST_ITEM_MARKER:
            return False
        token_ordered, body, token_marker = split_marker(token.marker)
        if token_ordered != ordered or token_marker != marker:
            return False
        return not ordered or marker_fits_style(body, style)

    def _parse_list_item(self) -> ListItem:
        """Parse one list item starting at the current LIST_ITEM_MARKER token."""
        token = self._current
        content_indent = token.content_indent
        lines = [Line(token.value, token.lineno, token.line.col + content_indent)]
        lines.extend(self._gather_item_lines(token))

        # Trailing blank lines separate items; they are not item content
        while len(lines) > 1 and lines[-1].is_blank():
            lines.pop()

        children = self._parse_nested(lines)
        self._advance()

        return ListItem(
            location=self._location(token, lines[-1].lineno),
            children=children,
        )

    def _gather_item_lines(self, token: Token) -> list[Line]:
        """Consume the raw lines that continue a list item.

        An item with an empty marker line followed by a blank line is
        empty: only the blank lines are consumed.
        """
        lexer = self._lexer
        content_indent = token.content_indent
        empty_start = not token.value
        taken: list[Line] = []
        while (line := lexer.peek_line()) is not None:
            if not line.is_blank():
                if empty_start and taken and all(prev.is_blank() for prev in taken):
                    break
                if not has_indent(line.text, content_indent):
                    break
            lexer.take_lines(1)
            taken.append(
                Line(
                    strip_columns(line.text, content_indent),
                    line.lineno,
                    line.col + content_indent,
                )
            )
        return taken
