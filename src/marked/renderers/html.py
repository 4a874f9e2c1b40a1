"""HTML renderer using StringBuilder pattern.

Renders a Document to HTML with one line-oriented fragment per block.
Output is deterministic: the same tree always renders to the same string.

Thread Safety:
All per-render state is a StringBuilder created fresh for each render()
call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from __future__ import annotations

from marked.errors import RenderError
from marked.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Header,
    List,
    ListItem,
    ListStyle,
    Paragraph,
    ThematicBreak,
)
from marked.stringbuilder import StringBuilder
from marked.utils.text import html_escape

# Value of the <ol type="..."> attribute per numbering style
_OL_TYPES: dict[ListStyle, str] = {
    ListStyle.LOWER_ALPHA: "a",
    ListStyle.UPPER_ALPHA: "A",
    ListStyle.LOWER_ROMAN: "i",
    ListStyle.UPPER_ROMAN: "I",
}


class HtmlRenderer:
    """Render AST to HTML using StringBuilder pattern.

    Usage:
        >>> from marked import parse
        >>> HtmlRenderer().render(parse("Title\\n===\\n\\nb. two\\nc. three"))
        '<h1>Title</h1>\\n<ol type="a" start="2">\\n<li>two</li>\\n<li>three</li>\\n</ol>\\n'

    Args:
        numbering_styles: Emit ``type="a"``/``"A"``/``"i"``/``"I"`` on
            ordered lists. When False every ordered list renders as a
            plain ``<ol>`` (the ``start`` attribute is kept).

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_numbering_styles",)

    def __init__(self, *, numbering_styles: bool = True) -> None:
        self._numbering_styles = numbering_styles

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Raises:
            RenderError: If the tree contains an object that is not a block
        """
        sb = StringBuilder()
        self._render_block(node, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block | Document, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Paragraph():
                sb.append("<p>").append(self._lines_text(block.lines)).append("</p>\n")
            case Header():
                sb.append(f"<h{block.level}>")
                sb.append(html_escape(block.content))
                sb.append(f"</h{block.level}>\n")
            case CodeBlock():
                self._render_code_block(block, sb)
            case Blockquote():
                sb.append("<blockquote>\n")
                for child in block.children:
                    self._render_block(child, sb)
                sb.append("</blockquote>\n")
            case List():
                self._render_list(block, sb)
            case ThematicBreak():
                sb.append("<hr />\n")
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case ListItem():
                # Should be rendered by list, but handle standalone
                self._render_list_item(block, sb)
            case _:
                raise RenderError(block, type(self).__name__)

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder) -> None:
        """Render fenced code block; every content line ends with a newline."""
        lang_class = f' class="language-{html_escape(code.language)}"' if code.language else ""
        sb.append(f"<pre><code{lang_class}>")
        for line in code.lines:
            sb.append(html_escape(line)).append("\n")
        sb.append("</code></pre>\n")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list."""
        if lst.ordered:
            type_attr = ""
            if self._numbering_styles and lst.style in _OL_TYPES:
                type_attr = f' type="{_OL_TYPES[lst.style]}"'
            start_attr = f' start="{lst.start}"' if lst.start != 1 else ""
            sb.append(f"<ol{type_attr}{start_attr}>\n")
        else:
            sb.append("<ul>\n")

        for item in lst.items:
            self._render_list_item(item, sb)

        sb.append("</ol>\n" if lst.ordered else "</ul>\n")

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        """Render list item.

        - Tight item (empty or a single paragraph): <li>text</li>
        - Loose item: <li>\\n<p>text</p>\\n...</li>
        """
        sb.append("<li>")
        if item.is_tight:
            if item.children:
                paragraph = item.children[0]
                assert isinstance(paragraph, Paragraph)
                sb.append(self._lines_text(paragraph.lines))
        else:
            sb.append("\n")
            for child in item.children:
                self._render_block(child, sb)
        sb.append("</li>\n")

    def _lines_text(self, lines: tuple[str, ...]) -> str:
        return "\n".join(html_escape(line) for line in lines)
