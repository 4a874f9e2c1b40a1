"""Fenced code mode scanner mixin."""

from __future__ import annotations

from marked.tokens import Line, Token, TokenType


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Inside a fence every line is content except the closing fence. No
    other classification runs, so code lines are never reinterpreted.

    """

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

    def _is_closing_fence(self, text: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self, line: Line) -> Token:
        """Classify a line inside a fenced code block.

        Returns:
            FENCED_CODE_END for the closing fence, otherwise a
            FENCED_CODE_CONTENT token holding the line verbatim.
        """
        if self._is_closing_fence(line.text):
            return self._make_token(
                TokenType.FENCED_CODE_END,
                line.text.strip(),
                line,
                marker=self._fence_char * self._fence_count,
            )
        return self._make_token(TokenType.FENCED_CODE_CONTENT, line.text, line)
