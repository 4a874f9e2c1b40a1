"""Ordered list numbering: style inference, ordinals and formatting.

Mark recognises five numbering styles. Which one a list uses is decided
once, from the body of its first marker (the marker without its "." or ")"
delimiter), and then held for the whole list:

=========  ===========================  ==============
Body       Style                        Example
=========  ===========================  ==============
digits     ``ListStyle.DECIMAL``        ``1.``  ``12)``
a-z        ``ListStyle.LOWER_ALPHA``    ``a.``  ``q)``
A-Z        ``ListStyle.UPPER_ALPHA``    ``B.``
i, iv, ..  ``ListStyle.LOWER_ROMAN``    ``ii.`` ``xiv)``
I, IV, ..  ``ListStyle.UPPER_ROMAN``    ``III.``
=========  ===========================  ==============

Tie-break policy:
    A single letter from ``ivxlcdm`` (or upper case) reads as both an alpha
    marker and a roman numeral. Such a list is roman only when the second
    item settles it: the second body is a roman numeral of the same case
    whose value is exactly one higher, and the two letters are not
    alphabetically consecutive. ``i.``/``ii.`` is roman, ``i.``/``j.`` and
    ``c.``/``d.`` are alphabetic, and a lone ``i.`` is alphabetic (ordinal 9).
    Multi-letter bodies can only be roman numerals.

Every function here is pure and safe to call from any thread.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from marked.nodes import ListStyle
from marked.parsing.charsets import ROMAN_DIGITS
from marked.utils.logger import get_logger

logger = get_logger(__name__)

# Canonical roman numerals from 1 to 3999 (no bar notation)
_ROMAN_PATTERN = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")

_ROMAN_VALUES: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ALPHA_STYLES = frozenset({ListStyle.LOWER_ALPHA, ListStyle.UPPER_ALPHA})
_ROMAN_STYLES = frozenset({ListStyle.LOWER_ROMAN, ListStyle.UPPER_ROMAN})

MAX_DECIMAL_DIGITS = 9


def is_roman(text: str) -> bool:
    """Check if text is a canonical roman numeral in a single case."""
    if not text or not (text.islower() or text.isupper()):
        return False
    return _ROMAN_PATTERN.fullmatch(text.upper()) is not None


def from_roman(text: str) -> int:
    """Value of a roman numeral. Caller must check ``is_roman`` first."""
    text = text.upper()
    value = 0
    pos = 0
    for number, numeral in _ROMAN_VALUES:
        while text.startswith(numeral, pos):
            value += number
            pos += len(numeral)
    return value


def to_roman(value: int) -> str:
    """Upper-case roman numeral for 1 <= value <= 3999."""
    if not 0 < value < 4000:
        msg = f"roman numerals cover 1..3999, got {value}"
        raise ValueError(msg)
    parts: list[str] = []
    for number, numeral in _ROMAN_VALUES:
        count, value = divmod(value, number)
        parts.append(numeral * count)
    return "".join(parts)


def is_marker_body(body: str) -> bool:
    """Check if text can precede a "." or ")" in an ordered list marker."""
    if not body:
        return False
    if body.isdigit():
        return body.isascii() and len(body) <= MAX_DECIMAL_DIGITS
    if len(body) == 1:
        return body.isascii() and body.isalpha()
    return is_roman(body)


def _is_ambiguous(body: str) -> bool:
    return len(body) == 1 and body.lower() in ROMAN_DIGITS


def classify_list_style(markers: Sequence[str]) -> ListStyle:
    """Infer the numbering style of an ordered list.

    Args:
        markers: Marker bodies of the list's first item and, when the parser
            has seen it, its second item. Later entries are ignored.

    Returns:
        The list style. Never NONE for a valid ordered marker body.
    """
    first = markers[0]
    if first.isdigit():
        return ListStyle.DECIMAL

    upper = first.isupper()
    alpha = ListStyle.UPPER_ALPHA if upper else ListStyle.LOWER_ALPHA
    roman = ListStyle.UPPER_ROMAN if upper else ListStyle.LOWER_ROMAN

    if len(first) > 1:
        return roman
    if not _is_ambiguous(first):
        return alpha

    if len(markers) < 2:
        return alpha

    second = markers[1]
    if second.isupper() != upper or not is_roman(second):
        return alpha
    alpha_consecutive = len(second) == 1 and ord(second) == ord(first) + 1
    roman_consecutive = from_roman(second) == from_roman(first) + 1
    if roman_consecutive and not alpha_consecutive:
        logger.debug("List %r/%r resolved as roman numbering", first, second)
        return roman
    return alpha


def marker_fits_style(body: str, style: ListStyle) -> bool:
    """Check if a marker body can continue a list of the given style."""
    if style is ListStyle.DECIMAL:
        return body.isdigit()
    if style in _ALPHA_STYLES:
        upper = style is ListStyle.UPPER_ALPHA
        return len(body) == 1 and body.isalpha() and body.isupper() == upper
    if style in _ROMAN_STYLES:
        upper = style is ListStyle.UPPER_ROMAN
        return is_roman(body) and body.isupper() == upper
    return False


def marker_ordinal(body: str, style: ListStyle) -> int:
    """Number denoted by a marker body under the given style."""
    if style is ListStyle.DECIMAL:
        return int(body)
    if style in _ALPHA_STYLES:
        return ord(body.lower()) - ord("a") + 1
    if style in _ROMAN_STYLES:
        return from_roman(body)
    return 1


def can_interrupt_paragraph(body: str) -> bool:
    """Check if an ordered marker may start a list right after a paragraph line.

    Only a marker that denotes 1 as the first item of a list may do so
    (``1``, ``a``, ``A``). A lone ``i`` reads as the ninth letter, so it
    does not. Anything else is read as paragraph text, so prose such as
    "see\\nb. below" is left alone.
    """
    return marker_ordinal(body, classify_list_style([body])) == 1


def format_ordinal(value: int, style: ListStyle) -> str:
    """Marker body for the ``value``-th item of a list in ``style``.

    Alpha styles wrap after z (27 -> "a"), since multi-letter alpha markers
    do not exist in Mark. Roman styles fall back to digits outside 1..3999.
    """
    match style:
        case ListStyle.LOWER_ALPHA | ListStyle.UPPER_ALPHA:
            letter = chr(ord("a") + (value - 1) % 26)
            return letter.upper() if style is ListStyle.UPPER_ALPHA else letter
        case ListStyle.LOWER_ROMAN | ListStyle.UPPER_ROMAN:
            if not 0 < value < 4000:
                return str(value)
            numeral = to_roman(value)
            return numeral if style is ListStyle.UPPER_ROMAN else numeral.lower()
        case _:
            return str(value)
