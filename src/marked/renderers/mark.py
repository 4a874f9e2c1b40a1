"""Mark source renderer (formatter).

Renders a Document back to canonical Mark text:

- blocks are separated by one blank line
- headers are underlined with ``=`` (level 1) or ``-`` (level 2), at
  least three characters and at least as long as the text
- thematic breaks are written as ``---``
- ordered lists are renumbered from their start value in their own
  style and delimiter
- list item content is indented to the width of its marker plus one
- blockquote lines get a ``> `` prefix (``>`` alone on blank lines)
- code blocks are fenced with a run no content line can close

For any document produced by ``parse``, parsing the formatted text gives
back an equal document.

Thread Safety:
MarkRenderer holds no state; all work happens on per-call lists.
"""

from __future__ import annotations

from collections.abc import Sequence

from marked.errors import RenderError
from marked.lexer import Lexer
from marked.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Header,
    List,
    ListItem,
    Paragraph,
    ThematicBreak,
)
from marked.parsing.numbering import format_ordinal
from marked.tokens import TokenType

# First children written on the marker line itself; anything else starts
# on the next line so its first line is never read together with the marker
_INLINE_FIRST_CHILDREN = (Paragraph, Header)

# Line types that may open a paragraph
_PARAGRAPH_START_TYPES = frozenset({TokenType.PARAGRAPH_LINE, TokenType.SETEXT_UNDERLINE})


def _glued_to_paragraph(block: Block, previous: Block) -> bool:
    """Check if a header must follow its paragraph without a blank line.

    A header split off a paragraph may carry text that only continues a
    paragraph, such as "b. x". Written after a blank line it would start
    a list instead.
    """
    if not isinstance(block, Header) or not isinstance(previous, Paragraph):
        return False
    token = Lexer.from_source(block.content).next_token()
    return token.type not in _PARAGRAPH_START_TYPES


def _longest_run(lines: Sequence[str], char: str) -> int:
    longest = 0
    for line in lines:
        run = 0
        for c in line:
            run = run + 1 if c == char else 0
            longest = max(longest, run)
    return longest


class MarkRenderer:
    """Render AST to canonical Mark source.

    Usage:
        >>> from marked import parse
        >>> MarkRenderer().render(parse("Title\\n===\\n3) one\\n9) two"))
        'Title\\n=====\\n\\n3) one\\n4) two\\n'

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to Mark text ending in a newline (empty for no blocks)."""
        lines = self._blocks_lines(node.children)
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def _blocks_lines(self, blocks: Sequence[Block]) -> list[str]:
        lines: list[str] = []
        for index, block in enumerate(blocks):
            if index and not _glued_to_paragraph(block, blocks[index - 1]):
                lines.append("")
            lines.extend(self._block_lines(block))
        return lines

    def _block_lines(self, block: Block) -> list[str]:
        """Render a block node to source lines."""
        match block:
            case Paragraph():
                return list(block.lines)
            case Header():
                underline = "=" if block.level == 1 else "-"
                return [block.content, underline * max(3, len(block.content))]
            case ThematicBreak():
                return ["---"]
            case CodeBlock():
                return self._code_block_lines(block)
            case Blockquote():
                inner = self._blocks_lines(block.children)
                if not inner:
                    return [">"]
                return [f"> {line}" if line else ">" for line in inner]
            case List():
                return self._list_lines(block)
            case ListItem():
                return self._item_lines(block, "-")
            case _:
                raise RenderError(block, type(self).__name__)

    def _code_block_lines(self, code: CodeBlock) -> list[str]:
        """Fence code with a backtick run longer than any backtick run inside it."""
        language = code.language or ""
        fence = "`" * max(3, _longest_run(code.lines, "`") + 1)
        separator = " " if language.startswith("`") else ""
        return [f"{fence}{separator}{language}", *code.lines, fence]

    def _list_lines(self, lst: List) -> list[str]:
        lines: list[str] = []
        spaced = not all(item.is_tight for item in lst.items)
        for index, item in enumerate(lst.items):
            if lst.ordered:
                marker = format_ordinal(lst.start + index, lst.style) + lst.marker
            else:
                marker = lst.marker or "-"
            if index and spaced:
                lines.append("")
            lines.extend(self._item_lines(item, marker))
        return lines

    def _item_lines(self, item: ListItem, marker: str) -> list[str]:
        """Render list item; continuation lines are indented past the marker."""
        inner = self._blocks_lines(item.children)
        if not inner:
            return [marker]
        indent = " " * (len(marker) + 1)
        rest = [indent + line if line else "" for line in inner]
        if isinstance(item.children[0], _INLINE_FIRST_CHILDREN):
            return [f"{marker} {inner[0]}", *rest[1:]]
        return [marker, *rest]
