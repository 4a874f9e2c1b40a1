"""Parsing subsystem for the Marked parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `BlockParsingMixin`: Block-level content (paragraphs, lists, code blocks)

The numbering policy for ordered lists lives in `marked.parsing.numbering`
and can be used on its own.

Example:
    >>> from marked.parsing import BlockParsingMixin, TokenNavigationMixin
    >>> class Parser(TokenNavigationMixin, BlockParsingMixin):
    ...     pass

"""

from marked.parsing.blocks import BlockParsingMixin
from marked.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "BlockParsingMixin",
    "TokenNavigationMixin",
]
