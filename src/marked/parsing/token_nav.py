"""Token navigation utilities for the Marked parser.

Provides mixin for token stream navigation and location building.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marked.location import SourceLocation
from marked.tokens import Token, TokenType

if TYPE_CHECKING:
    from marked.lexer import Lexer


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    The parser pulls tokens from its lexer one at a time. ``_current`` is
    the token under consideration; its line has already been committed,
    so raw lines peeked from the lexer are the ones after it.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token
        - _source_file: str | None

    """

    _lexer: Lexer
    _current: Token
    _source_file: str | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current.type == TokenType.EOF

    def _advance(self) -> Token:
        """Advance to next token and return it."""
        self._current = self._lexer.next_token()
        return self._current

    def _location(self, token: Token, end_lineno: int | None = None) -> SourceLocation:
        """Source location of a token, optionally spanning to ``end_lineno``."""
        start = token.location
        return SourceLocation(
            lineno=start.lineno,
            col_offset=start.col_offset,
            end_lineno=end_lineno if end_lineno is not None else token.lineno,
            source_file=self._source_file,
        )
