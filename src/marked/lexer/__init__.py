"""Line-cursor lexer for the Marked parser.

The lexer takes one line at a time, classifies it and commits. Its only
state besides the cursor is the fence mode.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, split_lines
├── core.py              # Lexer class (mixin composition + cursor)
├── modes.py             # LexerMode enum
├── classifiers/         # Block-type classification mixins
│   ├── thematic.py      # Thematic break
│   ├── fence.py         # Fenced code start and close
│   ├── list.py          # List markers
│   ├── quote.py         # Block quote
│   └── setext.py        # === underline
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (classification order)
    └── fence.py         # Code fence mode

Usage:
    >>> from marked.lexer import Lexer
    >>> lexer = Lexer.from_source("> quote")
    >>> lexer.next_token()
    Token(BLOCK_QUOTE_MARKER, 'quote', 1:1)

"""

from marked.lexer.core import Lexer, split_lines
from marked.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "split_lines"]
