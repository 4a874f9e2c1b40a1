"""Typed AST nodes for Mark documents.

All AST nodes are frozen dataclasses with slots:
- Immutability: a parsed Document is never modified, safe to share
- Pattern matching: renderers dispatch with ``match`` statements
- Structural equality: ``location`` is excluded from comparison, so two
  documents are equal when their block trees are

Node Hierarchy:
Node (base)
├── Document
├── Paragraph
├── Header
├── Blockquote
├── List
├── ListItem
├── ThematicBreak
└── CodeBlock

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TypeAlias

from marked.location import SourceLocation


class ListStyle(Enum):
    """Numbering style of a list.

    Unordered lists always use NONE. Ordered lists pick one of the other
    members from their first marker (see ``marked.parsing.numbering``).
    """

    NONE = "none"
    LOWER_ALPHA = "lower-alpha"
    UPPER_ALPHA = "upper-alpha"
    LOWER_ROMAN = "lower-roman"
    UPPER_ROMAN = "upper-roman"
    DECIMAL = "decimal"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation = field(compare=False, repr=False)


# =============================================================================
# Leaf Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Mark: consecutive non-blank lines
    HTML: <p>line\\nline</p>

    Each entry of ``lines`` is one source line with surrounding whitespace
    removed. Inline markup is not interpreted.

    """

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Header(Node):
    """Setext header.

    Mark: Title\\n===== (level 1) or Title\\n----- (level 2)
    HTML: <h1>Title</h1>

    """

    level: Literal[1, 2]
    content: str


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Mark: --- or *** or ___ (spaces allowed between the characters)
    HTML: <hr />

    """


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Mark: ```lang ... ``` or ~~~lang ... ~~~
    HTML: <pre><code class="language-lang">...</code></pre>

    ``lines`` holds the content exactly as written between the fences.
    Indentation-triggered code blocks do not exist in Mark, so ``fenced``
    is always True for parsed documents.

    """

    language: str | None
    lines: tuple[str, ...]
    fenced: bool = True


# =============================================================================
# Container Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """Block quote.

    Mark: > quoted text
    HTML: <blockquote>...</blockquote>

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Mark: - item or b. item
    HTML: <li>item</li>

    """

    children: tuple[Block, ...]

    @property
    def is_tight(self) -> bool:
        """True when the item is empty or holds a single paragraph."""
        if not self.children:
            return True
        return len(self.children) == 1 and isinstance(self.children[0], Paragraph)


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Mark: - item, * item, + item, 1. item, a) item, IV. item, ...
    HTML: <ul>/<ol> with <li> children

    Attributes:
        items: The list items, in input order
        ordered: Whether the list is numbered
        style: Numbering style, NONE for unordered lists
        start: Ordinal of the first item (1 for unordered lists)
        marker: Bullet character for unordered lists, delimiter ("." or ")")
            for ordered lists

    """

    items: tuple[ListItem, ...]
    ordered: bool = False
    style: ListStyle = ListStyle.NONE
    start: int = 1
    marker: str = ""


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


# Type alias for block elements
Block: TypeAlias = Paragraph | Header | ThematicBreak | CodeBlock | Blockquote | List | ListItem
