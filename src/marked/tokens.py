"""Token and TokenType definitions for the Marked lexer.

The lexer turns each source line into exactly one Token. Container
continuation lines are handed to the parser as raw ``Line`` records and
classified later by a nested lexer.

Thread Safety:
Token and Line are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from marked.location import SourceLocation


class TokenType(Enum):
    """Line classifications produced by the lexer."""

    # Document structure
    EOF = auto()
    BLANK_LINE = auto()

    # Leaf blocks
    THEMATIC_BREAK = auto()  # ---, ***, ___
    SETEXT_UNDERLINE = auto()  # ===
    PARAGRAPH_LINE = auto()

    # Fenced code
    FENCED_CODE_START = auto()  # ``` or ~~~
    FENCED_CODE_CONTENT = auto()
    FENCED_CODE_END = auto()

    # Containers
    BLOCK_QUOTE_MARKER = auto()  # >
    LIST_ITEM_MARKER = auto()  # -, *, +, 1., a), iv., ...


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line of input.

    Attributes:
        text: Line content without the trailing newline
        lineno: Line number in the original source (1-indexed)
        col: Column where ``text`` starts in the original source (1-indexed).
            Greater than 1 once container markers have been stripped.
    """

    text: str
    lineno: int
    col: int = 1

    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified line.

    Attributes:
        type: The token type
        value: Classified content. Stripped text for paragraph lines, raw
            text for thematic breaks and code content, the info string for
            fence starts and the text after the marker for list items.
        line: The line this token was produced from
        line_indent: Leading whitespace width (tabs expand to 4)
        marker: List marker without trailing whitespace ("-", "b.", "iv)"),
            or the fence run for fence tokens
        content_indent: For list items, the column width owned by the item;
            continuation lines must be indented at least this much
    """

    type: TokenType
    value: str
    line: Line
    line_indent: int = 0
    marker: str = ""
    content_indent: int = 0

    @property
    def lineno(self) -> int:
        return self.line.lineno

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(
            lineno=self.line.lineno,
            col_offset=self.line.col + self.line_indent,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.line.lineno}:{self.line.col})"
