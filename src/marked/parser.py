"""Recursive descent parser producing a typed block tree.

Consumes tokens from the Lexer and builds immutable (frozen) dataclass
nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `BlockParsingMixin`: Paragraphs, headers, code, quotes, lists

Containers are parsed by gathering their raw lines, stripping one level
of markers and running a nested Parser over the result. Nested parsers
keep original line numbers, so locations always point into the source.

Parsing is total: every input string produces a document and no
exception is raised for any input.

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from collections.abc import Sequence

from marked.config import ParseConfig, get_parse_config
from marked.lexer import Lexer, split_lines
from marked.nodes import Block
from marked.parsing import BlockParsingMixin, TokenNavigationMixin
from marked.tokens import Line, Token


class Parser(
    TokenNavigationMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for Mark.

    Usage:
            >>> parser = Parser.from_source("Title\\n===\\n\\nBody")
            >>> parser.parse()
        (Header(level=1, content='Title'), Paragraph(lines=('Body',)))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_lexer",
        "_current",
        "_source_file",
        "_depth",  # Container nesting level of this parser
    )

    def __init__(
        self,
        lines: Sequence[Line],
        source_file: str | None = None,
        depth: int = 0,
    ) -> None:
        """Initialize parser over pre-split lines.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            lines: Lines to parse
            source_file: Optional source file path for node locations
            depth: Container nesting level (0 for a whole document)
        """
        self._lexer = Lexer(lines)
        self._source_file = source_file
        self._depth = depth
        self._current: Token = self._lexer.next_token()

    @classmethod
    def from_source(cls, source: str, source_file: str | None = None) -> Parser:
        """Create a parser over raw source text."""
        return cls(split_lines(source), source_file)

    @property
    def _config(self) -> ParseConfig:
        """Current parse configuration (from ContextVar)."""
        return get_parse_config()

    def parse(self) -> tuple[Block, ...]:
        """Parse all lines into blocks.

        Returns:
            Tuple of Block nodes in document order
        """
        blocks: list[Block] = []
        while not self._at_end():
            blocks.extend(self._parse_block())
        return tuple(blocks)

    def _parse_nested(self, lines: list[Line]) -> tuple[Block, ...]:
        """Parse container content (blockquote or list item body) as blocks.

        Configuration is inherited via ContextVar; no copying needed.
        """
        return Parser(lines, self._source_file, self._depth + 1).parse()
