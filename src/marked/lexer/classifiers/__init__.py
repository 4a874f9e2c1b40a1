"""Block-level line classifiers for the Marked lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers are pure: they inspect one line and
return a Token or None, never moving the lexer.
"""

from marked.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from marked.lexer.classifiers.list import (
    ListClassifierMixin,
)
from marked.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from marked.lexer.classifiers.setext import (
    SetextClassifierMixin,
)
from marked.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "SetextClassifierMixin",
    "ThematicClassifierMixin",
]
