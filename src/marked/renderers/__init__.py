"""Marked renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to HTML using StringBuilder pattern
- MarkRenderer: Renders AST back to canonical Mark source

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from marked.renderers.html import HtmlRenderer
from marked.renderers.mark import MarkRenderer
from marked.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "MarkRenderer"]
