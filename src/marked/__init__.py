"""
Marked: parser and renderer for Mark, a lightweight structural markup.

Mark is the note body format of a self-hosted notes server. It has
paragraphs, setext headers, blockquotes, thematic breaks, fenced code
blocks and lists with five numbering styles (decimal, lower/upper alpha,
lower/upper roman). Inline markup is not interpreted.

Parsing is total: every string yields a Document, and no input makes
``parse`` raise. Documents are immutable and safe to share across threads.

Quick Start:
    >>> from marked import parse, render
    >>> doc = parse("Shopping\\n===\\n\\na. milk\\nb. eggs")
    >>> print(render(doc), end="")
    <h1>Shopping</h1>
    <ol type="a">
    <li>milk</li>
    <li>eggs</li>
    </ol>

    >>> # Or use the high-level Mark class
    >>> from marked import Mark
    >>> mark = Mark(numbering_styles=False)
    >>> html = mark("i. one\\nii. two")

Installation:
    pip install marked              # Parser, renderers and CLI (zero deps)
"""

from collections.abc import Iterable

from marked.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marked.errors import MarkedError, RenderError, SerializationError
from marked.lexer import Lexer, split_lines
from marked.location import SourceLocation
from marked.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Header,
    List,
    ListItem,
    ListStyle,
    Node,
    Paragraph,
    ThematicBreak,
)
from marked.parser import Parser
from marked.renderers import HtmlRenderer, MarkRenderer
from marked.tokens import Token, TokenType

__version__ = "0.1.0"


def _parse_document(source: str, source_file: str | None) -> Document:
    """Parse with the current ContextVar config and wrap blocks in a Document."""
    lines = split_lines(source)
    blocks = Parser(lines, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        end_lineno=max(1, len(lines)),
        source_file=source_file,
    )
    return Document(location=loc, children=blocks)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse Mark source into a typed AST.

    Never raises for any input string.

    Args:
        source: Mark source text
        source_file: Optional note path recorded in node locations
        config: Parse configuration. Defaults to the configuration active
            in the current context (see ``parse_config_context``).

    Returns:
        Document AST root node

    Example:
        >>> doc = parse("Title\\n---")
        >>> doc.children[0]
        Header(level=2, content='Title')
    """
    with parse_config_context(config or get_parse_config()):
        return _parse_document(source, source_file)


def render(doc: Document, *, numbering_styles: bool = True) -> str:
    """Render an AST Document to HTML.

    Args:
        doc: Document AST to render
        numbering_styles: Emit the ``type`` attribute on ordered lists

    Returns:
        HTML string

    Example:
        >>> print(render(parse("> quoted")), end="")
        <blockquote>
        <p>quoted</p>
        </blockquote>
    """
    return HtmlRenderer(numbering_styles=numbering_styles).render(doc)


def format_mark(doc: Document) -> str:
    """Render an AST Document back to canonical Mark source.

    ``parse(format_mark(doc)) == doc`` for every document ``parse`` returns.

    Example:
        >>> format_mark(parse("* a\\n* b\\n\\n\\n7) x"))
        '* a\\n* b\\n\\n7) x\\n'
    """
    return MarkRenderer().render(doc)


class Mark:
    """High-level Mark processor combining parser and renderers.

    Usage:
        >>> mark = Mark()
        >>> mark("Notes\\n===")
        '<h1>Notes</h1>\\n'

        >>> # Access the AST
        >>> doc = mark.parse("Notes\\n---")
        >>> doc.children[0].level
        2

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use one Mark
        instance, or several, concurrently from different threads.

    """

    __slots__ = ("_config", "_html")

    def __init__(
        self,
        config: ParseConfig | None = None,
        *,
        numbering_styles: bool = True,
    ) -> None:
        """Initialize Mark processor.

        Args:
            config: Parse configuration used for every call (defaults if None)
            numbering_styles: Emit the ``type`` attribute on ordered lists
        """
        self._config = config or ParseConfig()
        self._html = HtmlRenderer(numbering_styles=numbering_styles)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Mark to HTML in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Mark source into AST.

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.
        """
        with parse_config_context(self._config):
            return _parse_document(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple Mark sources into AST documents.

        Sets config once, parses all, restores once.

        Example:
            >>> mark = Mark()
            >>> docs = mark.parse_many(["one", "two\\n===", "- three"])
        """
        with parse_config_context(self._config):
            return [_parse_document(source, source_file) for source in sources]

    def render(self, doc: Document) -> str:
        """Render AST to HTML."""
        return self._html.render(doc)

    def format(self, doc: Document) -> str:
        """Render AST back to canonical Mark source."""
        return MarkRenderer().render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "format_mark",
    "Mark",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Nodes
    "Block",
    "Blockquote",
    "CodeBlock",
    "Document",
    "Header",
    "List",
    "ListItem",
    "ListStyle",
    "Node",
    "Paragraph",
    "ThematicBreak",
    "SourceLocation",
    # Lexer, parser, renderers
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "HtmlRenderer",
    "MarkRenderer",
    # Errors
    "MarkedError",
    "RenderError",
    "SerializationError",
]
