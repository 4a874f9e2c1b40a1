"""Setext underline classifier mixin."""

from __future__ import annotations

from marked.tokens import Line, Token, TokenType


class SetextClassifierMixin:
    """Mixin providing ``===`` underline classification.

    ``---`` underlines are lexed as thematic breaks; the parser decides
    whether one follows a paragraph line and so becomes a level 2 header.
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

    def _try_classify_setext_underline(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        if len(content) < 3 or content.strip("="):
            return None
        return self._make_token(
            TokenType.SETEXT_UNDERLINE,
            content,
            line,
            line_indent=indent,
            marker="=",
        )
