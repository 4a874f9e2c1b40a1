"""Block quote classifier mixin."""

from __future__ import annotations

from marked.tokens import Line, Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing block quote classification.

    Only the outermost ``>`` is recognised here. The parser strips it from
    every line of the quote and hands the rest to a nested lexer, so
    ``> > a`` becomes a quote marker now and another one one level down.
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

    def _try_classify_block_quote(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        """Classify a ``>`` line; value is the text after ``>`` and one space."""
        if not content.startswith(">"):
            return None

        rest = content[1:]
        if rest[:1] in (" ", "\t"):
            rest = rest[1:]

        return self._make_token(
            TokenType.BLOCK_QUOTE_MARKER,
            rest,
            line,
            line_indent=indent,
            marker=">",
        )
