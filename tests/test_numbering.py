"""Tests for ordered list numbering helpers."""

import pytest

from marked.nodes import ListStyle
from marked.parsing.numbering import (
    can_interrupt_paragraph,
    classify_list_style,
    format_ordinal,
    from_roman,
    is_marker_body,
    is_roman,
    marker_fits_style,
    marker_ordinal,
    to_roman,
)


class TestRomanNumerals:
    @pytest.mark.parametrize(
        "text,value",
        [("i", 1), ("iv", 4), ("ix", 9), ("xiv", 14), ("XL", 40), ("MCMXCIV", 1994), ("MMMCMXCIX", 3999)],
    )
    def test_from_roman(self, text: str, value: int) -> None:
        assert is_roman(text)
        assert from_roman(text) == value

    @pytest.mark.parametrize("value", [1, 4, 9, 14, 40, 90, 400, 1994, 3999])
    def test_to_roman_round_trip(self, value: int) -> None:
        assert from_roman(to_roman(value)) == value

    @pytest.mark.parametrize("text", ["", "IIII", "VX", "iV", "abc", "IC", "MMMM"])
    def test_not_canonical(self, text: str) -> None:
        assert not is_roman(text)

    @pytest.mark.parametrize("value", [0, -1, 4000])
    def test_to_roman_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError, match="1..3999"):
            to_roman(value)


class TestMarkerBody:
    @pytest.mark.parametrize("body", ["1", "0", "123456789", "a", "Z", "iv", "XII"])
    def test_valid(self, body: str) -> None:
        assert is_marker_body(body)

    @pytest.mark.parametrize("body", ["", "1234567890", "ab", "IIII", "é", "²", "1a"])
    def test_invalid(self, body: str) -> None:
        assert not is_marker_body(body)


class TestClassifyListStyle:
    """Style inference, including the alpha/roman tie-break."""

    @pytest.mark.parametrize(
        "markers,style",
        [
            (["1"], ListStyle.DECIMAL),
            (["42", "x"], ListStyle.DECIMAL),
            (["a"], ListStyle.LOWER_ALPHA),
            (["B"], ListStyle.UPPER_ALPHA),
            (["ii"], ListStyle.LOWER_ROMAN),
            (["IV"], ListStyle.UPPER_ROMAN),
            (["i"], ListStyle.LOWER_ALPHA),
            (["I"], ListStyle.UPPER_ALPHA),
            (["i", "ii"], ListStyle.LOWER_ROMAN),
            (["I", "II"], ListStyle.UPPER_ROMAN),
            (["i", "j"], ListStyle.LOWER_ALPHA),
            (["c", "d"], ListStyle.LOWER_ALPHA),
            (["v", "vi"], ListStyle.LOWER_ROMAN),
            (["x", "xi"], ListStyle.LOWER_ROMAN),
            (["i", "iii"], ListStyle.LOWER_ALPHA),
            (["i", "II"], ListStyle.LOWER_ALPHA),
        ],
    )
    def test_styles(self, markers: list[str], style: ListStyle) -> None:
        assert classify_list_style(markers) is style

    def test_later_markers_ignored(self) -> None:
        assert classify_list_style(["i", "ii", "zzz"]) is ListStyle.LOWER_ROMAN


class TestMarkerFitsStyle:
    @pytest.mark.parametrize(
        "body,style,fits",
        [
            ("7", ListStyle.DECIMAL, True),
            ("a", ListStyle.DECIMAL, False),
            ("q", ListStyle.LOWER_ALPHA, True),
            ("Q", ListStyle.LOWER_ALPHA, False),
            ("ii", ListStyle.LOWER_ALPHA, False),
            ("i", ListStyle.LOWER_ALPHA, True),
            ("iv", ListStyle.LOWER_ROMAN, True),
            ("IV", ListStyle.LOWER_ROMAN, False),
            ("b", ListStyle.LOWER_ROMAN, False),
            ("X", ListStyle.UPPER_ROMAN, True),
            ("1", ListStyle.NONE, False),
        ],
    )
    def test_fits(self, body: str, style: ListStyle, fits: bool) -> None:
        assert marker_fits_style(body, style) is fits


class TestOrdinals:
    @pytest.mark.parametrize(
        "body,style,value",
        [
            ("12", ListStyle.DECIMAL, 12),
            ("007", ListStyle.DECIMAL, 7),
            ("c", ListStyle.LOWER_ALPHA, 3),
            ("C", ListStyle.UPPER_ALPHA, 3),
            ("c", ListStyle.LOWER_ROMAN, 100),
            ("xiv", ListStyle.LOWER_ROMAN, 14),
        ],
    )
    def test_marker_ordinal(self, body: str, style: ListStyle, value: int) -> None:
        assert marker_ordinal(body, style) == value

    @pytest.mark.parametrize(
        "value,style,body",
        [
            (3, ListStyle.DECIMAL, "3"),
            (1, ListStyle.LOWER_ALPHA, "a"),
            (26, ListStyle.UPPER_ALPHA, "Z"),
            (27, ListStyle.LOWER_ALPHA, "a"),
            (4, ListStyle.LOWER_ROMAN, "iv"),
            (1994, ListStyle.UPPER_ROMAN, "MCMXCIV"),
            (4000, ListStyle.UPPER_ROMAN, "4000"),
            (0, ListStyle.LOWER_ROMAN, "0"),
        ],
    )
    def test_format_ordinal(self, value: int, style: ListStyle, body: str) -> None:
        assert format_ordinal(value, style) == body


class TestCanInterruptParagraph:
    @pytest.mark.parametrize("body", ["1", "01", "a", "A"])
    def test_one(self, body: str) -> None:
        assert can_interrupt_paragraph(body)

    @pytest.mark.parametrize("body", ["2", "0", "b", "ii", "B", "i", "I"])
    def test_other(self, body: str) -> None:
        assert not can_interrupt_paragraph(body)
