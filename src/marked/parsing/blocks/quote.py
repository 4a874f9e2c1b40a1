"""Block quote parsing for the Marked parser.

A blockquote owns its first ``>`` line, every following ``>`` line and
any run of blank lines that is followed by another ``>`` line. One ``>``
and one optional space are stripped from each line and the result is
parsed as a nested document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marked.nodes import Block, Blockquote
from marked.parsing.charsets import INLINE_WHITESPACE
from marked.tokens import Line, Token

if TYPE_CHECKING:
    from marked.lexer import Lexer
    from marked.location import SourceLocation


def is_quote_line(line: Line) -> bool:
    """Check if a raw line starts with a ``>`` marker."""
    return line.text.lstrip().startswith(">")


def strip_quote_marker(line: Line) -> Line:
    """Remove one quoting level (``>`` plus one space or tab) from a line."""
    text = line.text
    start = text.find(">")
    if start == -1 or text[:start].strip():
        return Line("", line.lineno, line.col)
    start += 1
    if text[start : start + 1] and text[start] in INLINE_WHITESPACE:
        start += 1
    return Line(text[start:], line.lineno, line.col + start)


class BlockQuoteParsingMixin:
    """Block quote parsing methods.

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

    def _parse_block_quote(self) -> Blockquote:
        """Parse block quote starting at the current BLOCK_QUOTE_MARKER token."""
        start = self._current
        lines = [start.line, *self._gather_quote_lines()]

        children = self._parse_nested([strip_quote_marker(line) for line in lines])
        self._advance()

        return Blockquote(
            location=self._location(start, lines[-1].lineno),
            children=children,
        )

    def _gather_quote_lines(self) -> list[Line]:
        """Consume the raw lines that continue the current blockquote."""
        lexer = self._lexer
        taken: list[Line] = []
        while (line := lexer.peek_line()) is not None:
            if is_quote_line(line):
                taken.extend(lexer.take_lines(1))
                continue
            if not line.is_blank():
                break
            # A blank run stays inside the quote only if another > line follows
            offset = 1
            while (ahead := lexer.peek_line(offset)) is not None and ahead.is_blank():
                offset += 1
            if ahead is None or not is_quote_line(ahead):
                break
            taken.extend(lexer.take_lines(offset))
        return taken
