"""Core block parsing for the Marked parser.

Provides block dispatch and the leaf blocks: paragraphs, setext headers,
thematic breaks and fenced code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marked.nodes import (
    Block,
    CodeBlock,
    Header,
    Paragraph,
    ThematicBreak,
)
from marked.parsing.charsets import ORDERED_LIST_DELIMITERS
from marked.parsing.numbering import can_interrupt_paragraph
from marked.tokens import Token, TokenType
from marked.utils.logger import get_logger

if TYPE_CHECKING:
    from marked.config import ParseConfig
    from marked.location import SourceLocation

logger = get_logger(__name__)


def _is_dash_underline(token: Token) -> bool:
    """Check if a thematic break token is an unbroken run of ``-``."""
    return token.marker == "-" and " " not in token.value and "\t" not in token.value


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _current: Token
        - _depth: int
        - _config: ParseConfig

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token
        - _location(token, end_lineno) -> SourceLocation
        - _parse_block_quote() -> Blockquote
        - _parse_list() -> List

    """

    # _parse_block_quote and _parse_list come from sibling mixins; stubs here
    # would shadow them in the MRO

    _current: Token
    _depth: int

    @property
    def _config(self) -> ParseConfig:
        raise NotImplementedError

    def _advance(self) -> Token:
        raise NotImplementedError

    def _location(self, token: Token, end_lineno: int | None = None) -> SourceLocation:
        raise NotImplementedError

    def _parse_block(self) -> list[Block]:
        """Parse the block starting at the current token.

        Returns:
            The parsed blocks: none for blank lines, two when a setext
            header splits a paragraph, otherwise one.
        """
        token = self._current

        match token.type:
            case TokenType.BLANK_LINE:
                self._advance()
                return []  # Skip blank lines

            case TokenType.THEMATIC_BREAK:
                return [self._parse_thematic_break()]

            case TokenType.FENCED_CODE_START:
                return [self._parse_fenced_code()]

            case TokenType.BLOCK_QUOTE_MARKER if self._can_open_container():
                return [self._parse_block_quote()]

            case TokenType.LIST_ITEM_MARKER if self._can_open_container():
                return [self._parse_list()]

            case _:
                return self._parse_paragraph()

    def _can_open_container(self) -> bool:
        """Check if another blockquote or list item level may be opened."""
        return self._depth < self._config.max_nesting_depth

    def _parse_thematic_break(self) -> ThematicBreak:
        token = self._current
        self._advance()
        return ThematicBreak(location=self._location(token))

    def _parse_fenced_code(self) -> CodeBlock:
        """Parse fenced code block.

        Content lines are kept verbatim. A fence that is never closed runs
        to the end of the enclosing container or document.
        """
        start = self._current
        info_words = start.value.split()
        language = info_words[0] if info_words else None

        lines: list[str] = []
        end = start
        while True:
            token = self._advance()
            if token.type == TokenType.FENCED_CODE_CONTENT:
                lines.append(token.value)
                end = token
            elif token.type == TokenType.FENCED_CODE_END:
                end = token
                self._advance()
                break
            else:
                logger.debug(
                    "Code fence %r opened at line %d closed at end of input",
                    start.marker,
                    start.lineno,
                )
                break

        return CodeBlock(
            location=self._location(start, end.lineno),
            language=language,
            lines=tuple(lines),
        )

    # =========================================================================
    # Paragraphs and setext headers
    # =========================================================================

    def _parse_paragraph(self) -> list[Block]:
        """Parse paragraph lines, splitting off a setext header if one ends them.

        A paragraph continues through paragraph lines and through lines
        that look like other blocks but may not interrupt a paragraph. When
        it is ended by a setext underline, only its last line becomes the
        header.
        """
        setext = self._config.setext_headers
        tokens = [self._current]
        lines = [self._paragraph_text(self._current)]

        while True:
            token = self._advance()
            match token.type:
                case TokenType.PARAGRAPH_LINE:
                    pass
                case TokenType.SETEXT_UNDERLINE if setext:
                    return self._finish_setext(tokens, lines, token, level=1)
                case TokenType.SETEXT_UNDERLINE:
                    pass
                case TokenType.THEMATIC_BREAK if setext and _is_dash_underline(token):
                    return self._finish_setext(tokens, lines, token, level=2)
                case TokenType.LIST_ITEM_MARKER if not self._interrupts_paragraph(token):
                    pass
                case TokenType.BLOCK_QUOTE_MARKER if not self._can_open_container():
                    pass
                case _:
                    break
            tokens.append(token)
            lines.append(self._paragraph_text(token))

        return [self._make_paragraph(tokens, lines)]

    def _interrupts_paragraph(self, token: Token) -> bool:
        """Check if a list marker line ends the paragraph before it.

        Empty items never do. Ordered items do only when their marker
        denotes 1.
        """
        if not self._can_open_container():
            return False
        if not token.value.strip():
            return False
        if token.marker[-1] in ORDERED_LIST_DELIMITERS:
            return can_interrupt_paragraph(token.marker[:-1])
        return True

    def _paragraph_text(self, token: Token) -> str:
        if token.type == TokenType.PARAGRAPH_LINE:
            return token.value
        if token.type in (TokenType.BLOCK_QUOTE_MARKER, TokenType.LIST_ITEM_MARKER):
            if not self._can_open_container():
                logger.debug(
                    "Nesting limit %d reached at line %d, keeping %r as text",
                    self._config.max_nesting_depth,
                    token.lineno,
                    token.marker,
                )
        return token.line.text.strip()

    def _make_paragraph(self, tokens: list[Token], lines: list[str]) -> Paragraph:
        return Paragraph(
            location=self._location(tokens[0], tokens[-1].lineno),
            lines=tuple(lines),
        )

    def _finish_setext(
        self,
        tokens: list[Token],
        lines: list[str],
        underline: Token,
        *,
        level: int,
    ) -> list[Block]:
        """Turn the last paragraph line into a header; earlier lines stay a paragraph."""
        self._advance()
        header = Header(
            location=self._location(tokens[-1], underline.lineno),
            level=1 if level == 1 else 2,
            content=lines[-1],
        )
        if len(lines) == 1:
            return [header]
        return [self._make_paragraph(tokens[:-1], lines[:-1]), header]
