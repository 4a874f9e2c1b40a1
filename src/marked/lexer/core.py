"""Line-cursor lexer for Mark.

Implements a window-based approach: take one line, classify it, then
commit. Every call to ``next_token`` advances exactly one line, so the
lexer always makes forward progress.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string (or per
container body). All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from marked.lexer.classifiers import (
    FenceClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    SetextClassifierMixin,
    ThematicClassifierMixin,
)
from marked.lexer.modes import LexerMode
from marked.lexer.scanners import BlockScannerMixin, FenceScannerMixin
from marked.tokens import Line, Token, TokenType


def split_lines(source: str) -> list[Line]:
    """Split source text into numbered lines.

    ``\\r\\n`` and lone ``\\r`` are treated as ``\\n``. A trailing newline
    does not produce an extra empty line.
    """
    if not source:
        return []
    text = source.replace("\r\n", "\n").replace("\r", "\n")
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [Line(part, lineno) for lineno, part in enumerate(parts, start=1)]


class Lexer(
    # Classifiers (pure logic, no position mutation)
    ThematicClassifierMixin,
    FenceClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    SetextClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
):
    """Line-cursor lexer with O(n) guaranteed performance.

    Two ways of reading input:
    1. ``next_token()`` classifies the current line and commits it
    2. ``peek_line()`` / ``take_lines()`` hand out raw lines, used by the
       parser to gather the body of a blockquote or list item before a
       nested lexer classifies it

    Usage:
            >>> lexer = Lexer.from_source("Title\\n===\\n\\n- item")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(PARAGRAPH_LINE, 'Title', 1:1)
        Token(SETEXT_UNDERLINE, '===', 2:1)
        Token(BLANK_LINE, '', 3:1)
        Token(LIST_ITEM_MARKER, 'item', 4:1)
        Token(EOF, '', 5:1)

    Thread Safety:
        Lexer instances are single-use. All state is instance-local.

    """

    __slots__ = (
        "_lines",
        "_lines_len",  # Cached len(lines)
        "_pos",
        "_mode",
        "_fence_char",
        "_fence_count",
    )

    def __init__(self, lines: Sequence[Line]) -> None:
        """Initialize lexer over pre-split lines.

        Args:
            lines: Lines to classify. Nested lexers receive container
                content with markers already stripped.
        """
        self._lines = lines
        self._lines_len = len(lines)
        self._pos = 0
        self._mode = LexerMode.BLOCK

        # Fenced code state
        self._fence_char: str = ""
        self._fence_count: int = 0

    @classmethod
    def from_source(cls, source: str) -> Lexer:
        """Create a lexer over raw source text."""
        return cls(split_lines(source))

    @property
    def mode(self) -> LexerMode:
        return self._mode

    def at_end(self) -> bool:
        """Check if all lines have been consumed."""
        return self._pos >= self._lines_len

    def tokenize(self) -> Iterator[Token]:
        """Tokenize all remaining lines.

        Yields:
            Token objects one at a time, ending with EOF
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Classify the current line, commit it and return its token.

        Returns an EOF token on every call once input is exhausted.
        """
        if self._pos >= self._lines_len:
            return self._eof_token()

        line = self._lines[self._pos]
        self._pos += 1

        if self._mode == LexerMode.CODE_FENCE:
            token = self._scan_code_fence_content(line)
            if token.type == TokenType.FENCED_CODE_END:
                self._mode = LexerMode.BLOCK
                self._fence_char = ""
                self._fence_count = 0
            return token

        token = self._scan_block(line)
        if token.type == TokenType.FENCED_CODE_START:
            self._mode = LexerMode.CODE_FENCE
            self._fence_char = token.marker[0]
            self._fence_count = len(token.marker)
        return token

    # =========================================================================
    # Raw line access
    # =========================================================================

    def peek_line(self, offset: int = 0) -> Line | None:
        """Get an unconsumed line without classifying it."""
        pos = self._pos + offset
        if 0 <= pos < self._lines_len:
            return self._lines[pos]
        return None

    def take_lines(self, count: int) -> list[Line]:
        """Consume up to ``count`` raw lines without classifying them."""
        end = min(self._pos + count, self._lines_len)
        taken = list(self._lines[self._pos : end])
        self._pos = end
        return taken

    # =========================================================================
    # Token construction
    # =========================================================================

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
        """Create token for a line."""
        return Token(
            type=token_type,
            value=value,
            line=line,
            line_indent=line_indent,
            marker=marker,
            content_indent=content_indent,
        )

    def _eof_token(self) -> Token:
        if self._lines_len:
            last = self._lines[-1]
            line = Line("", last.lineno + 1, last.col)
        else:
            line = Line("", 1)
        return Token(TokenType.EOF, "", line)
