"""Block mode scanner mixin."""

from __future__ import annotations

from marked.parsing.charsets import FENCE_CHARS, THEMATIC_BREAK_CHARS
from marked.tokens import Line, Token, TokenType
from marked.utils.text import expand_indent


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Classifies one line in a fixed order, first match wins:
    blank, thematic break, fence start, list marker, block quote,
    setext underline, paragraph line.

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

    # Classifier methods (provided by classifier mixins)
    def _try_classify_thematic_break(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_fence_start(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_list_marker(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_block_quote(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_setext_underline(
        self, content: str, line: Line, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _scan_block(self, line: Line) -> Token:
        """Classify a line in block mode."""
        text = line.text
        indent, content_start = expand_indent(text)
        content = text[content_start:].rstrip()

        if not content:
            return self._make_token(TokenType.BLANK_LINE, "", line)

        first = content[0]

        if first in THEMATIC_BREAK_CHARS:
            token = self._try_classify_thematic_break(content, line, indent)
            if token:
                return token

        if first in FENCE_CHARS:
            token = self._try_classify_fence_start(content, line, indent)
            if token:
                return token

        token = self._try_classify_list_marker(text[content_start:], line, indent)
        if token:
            return token

        if first == ">":
            token = self._try_classify_block_quote(text[content_start:], line, indent)
            if token:
                return token

        if first == "=":
            token = self._try_classify_setext_underline(content, line, indent)
            if token:
                return token

        return self._make_token(TokenType.PARAGRAPH_LINE, content, line, line_indent=indent)
