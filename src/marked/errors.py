"""Exception classes for Marked.

Parsing never raises: every line of input maps to some block. The
exceptions here cover the remaining surfaces, rendering hand-built trees
and reading serialized ones.
"""

from __future__ import annotations


class MarkedError(Exception):
    """Base exception for all Marked errors."""

    pass


class RenderError(MarkedError):
    """Error during rendering.

    Raised when a renderer meets an object that is not a block node, which
    can only happen for trees assembled by hand.
    """

    def __init__(self, node: object, renderer: str) -> None:
        """Initialize render error.

        Args:
            node: The object that could not be rendered
            renderer: Name of the renderer class
        """
        self.node = node
        self.renderer = renderer
        super().__init__(f"{renderer} cannot render {type(node).__name__!s}: {node!r}")


class SerializationError(MarkedError, ValueError):
    """Error while rebuilding a Document from its serialized form."""

    pass
