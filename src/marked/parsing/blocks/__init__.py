"""Block parsing subsystem for the Marked parser.

Provides mixins for parsing block-level Mark content:
- Paragraphs and setext headers
- Thematic breaks
- Fenced code blocks
- Block quotes
- Lists (five numbering styles)

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch and leaf blocks
- quote: Blockquote line gathering
- list: List and list item line gathering

"""

from marked.parsing.blocks.core import BlockParsingCoreMixin
from marked.parsing.blocks.list import ListParsingMixin
from marked.parsing.blocks.quote import BlockQuoteParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    BlockQuoteParsingMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token
        - _depth: int
        - _config: ParseConfig

    Required Host Methods:
        - _advance() -> Token
        - _location(token, end_lineno) -> SourceLocation
        - _parse_nested(lines) -> tuple[Block, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "BlockQuoteParsingMixin",
    "ListParsingMixin",
]
