"""Source location tracking for AST nodes and debugging output.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the original note text.

    All positions are 1-indexed. Nodes nested in blockquotes or list items
    keep the line and column of the original source, not of the stripped
    container content.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        end_lineno: Last line covered by the node (optional)
        source_file: Note path, when the caller provided one

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=3, source_file="notes/todo.mk")
            >>> str(loc)
            'notes/todo.mk:3:3'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for nodes built by hand rather than parsed."""
        return cls(lineno=0, col_offset=0)
