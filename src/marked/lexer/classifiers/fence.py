"""Fenced code block classifier mixin."""

from __future__ import annotations

from marked.parsing.charsets import FENCE_CHARS
from marked.tokens import Line, Token, TokenType


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the Lexer class
    _fence_char: str
    _fence_count: int

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

    def _try_classify_fence_start(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        """Try to classify content as fenced code start.

        Fenced code blocks start with 3+ backticks or tildes. Any text
        after the run is the info string.

        Classification is pure: the Lexer switches to CODE_FENCE mode
        when it commits the returned token.

        Args:
            content: Line content with leading and trailing whitespace stripped
            line: The line being classified
            indent: Leading whitespace width

        Returns:
            Token whose ``marker`` is the fence run and ``value`` the info
            string, or None.
        """
        if not content:
            return None

        fence_char = content[0]
        if fence_char not in FENCE_CHARS:
            return None

        count = 0
        while count < len(content) and content[count] == fence_char:
            count += 1

        if count < 3:
            return None

        info = content[count:].strip()

        return self._make_token(
            TokenType.FENCED_CODE_START,
            info,
            line,
            line_indent=indent,
            marker=fence_char * count,
        )

    def _is_closing_fence(self, text: str) -> bool:
        """Check if a line closes the current code block.

        The closing fence uses the opening character, is at least as long
        as the opening run and has nothing but whitespace around it.
        """
        if not self._fence_char:
            return False

        content = text.strip()
        if not content.startswith(self._fence_char):
            return False

        count = 0
        while count < len(content) and content[count] == self._fence_char:
            count += 1

        return count >= self._fence_count and count == len(content)
