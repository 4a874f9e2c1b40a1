"""Thematic break classifier mixin."""

from __future__ import annotations

from marked.parsing.charsets import INLINE_WHITESPACE, THEMATIC_BREAK_CHARS
from marked.tokens import Line, Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

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

    def _try_classify_thematic_break(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        """Try to classify content as thematic break.

        Thematic breaks are 3+ of the same character (-, *, _) with
        optional spaces/tabs between them.

        Args:
            content: Line content with leading and trailing whitespace stripped
            line: The line being classified
            indent: Leading whitespace width

        Returns:
            Token if valid break, None otherwise.
        """
        if not content:
            return None

        char = content[0]
        if char not in THEMATIC_BREAK_CHARS:
            return None

        count = 0
        for c in content:
            if c == char:
                count += 1
            elif c not in INLINE_WHITESPACE:
                return None

        if count < 3:
            return None

        # Value keeps interior whitespace: only an unbroken "---" run
        # may serve as a setext underline
        return self._make_token(
            TokenType.THEMATIC_BREAK,
            content,
            line,
            line_indent=indent,
            marker=char,
        )
