"""Character sets for O(1) line classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from marked.parsing.charsets import FENCE_CHARS

    if content[0] in FENCE_CHARS:  # O(1) lookup
        ...
"""

# Characters that can form a thematic break: ---, ***, ___
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# Characters that open a fenced code block: ``` or ~~~
FENCE_CHARS: frozenset[str] = frozenset("`~")

# Bullets of unordered list items
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Characters closing an ordered list marker: 1. or 1)
ORDERED_LIST_DELIMITERS: frozenset[str] = frozenset(".)")

# Letters that are roman numerals on their own; a single one of these is
# ambiguous between alphabetic and roman numbering
ROMAN_DIGITS: frozenset[str] = frozenset("ivxlcdm")

# Whitespace allowed between marker characters and around markers
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t")
