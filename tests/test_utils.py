"""Tests for marked.utils and the StringBuilder."""

import logging

import pytest

from marked.stringbuilder import StringBuilder
from marked.utils import expand_indent, get_logger, has_indent, html_escape, strip_columns


class TestHtmlEscape:
    def test_special_characters(self) -> None:
        assert html_escape('a < b & "c" > d') == "a &lt; b &amp; &quot;c&quot; &gt; d"

    def test_single_quote_kept(self) -> None:
        assert html_escape("it's") == "it's"

    def test_empty(self) -> None:
        assert html_escape("") == ""

    def test_already_escaped_is_escaped_again(self) -> None:
        assert html_escape("&amp;") == "&amp;amp;"


class TestExpandIndent:
    @pytest.mark.parametrize(
        "text,indent,start",
        [
            ("x", 0, 0),
            ("  x", 2, 2),
            ("\tx", 4, 1),
            ("  \tx", 4, 3),
            (" \t\tx", 8, 3),
            ("    ", 4, 4),
        ],
    )
    def test_expand(self, text: str, indent: int, start: int) -> None:
        assert expand_indent(text) == (indent, start)


class TestHasIndent:
    @pytest.mark.parametrize(
        "text,count,expected",
        [
            ("  x", 2, True),
            (" x", 2, False),
            ("\tx", 4, True),
            ("  \tx", 3, True),
            ("x", 0, True),
            ("", 1, False),
            ("   ", 4, False),
        ],
    )
    def test_has_indent(self, text: str, count: int, expected: bool) -> None:
        assert has_indent(text, count) is expected

    @pytest.mark.parametrize("text", ["x", "  x", "\t\tx", " \t  x", "        ", "\t \t"])
    def test_agrees_with_expand_indent(self, text: str) -> None:
        for count in range(10):
            assert has_indent(text, count) is (expand_indent(text)[0] >= count)


class TestStripColumns:
    @pytest.mark.parametrize(
        "text,count,result",
        [
            ("    x", 2, "  x"),
            ("  x", 4, "x"),
            ("\tx", 4, "x"),
            ("\tx", 2, "  x"),
            ("  \tx", 2, "\tx"),
            (" \tx", 2, "  x"),
            ("x", 3, "x"),
            ("", 2, ""),
        ],
    )
    def test_strip(self, text: str, count: int, result: str) -> None:
        assert strip_columns(text, count) == result


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("lexer").name == "marked.lexer"

    def test_package_names_kept(self) -> None:
        assert get_logger("marked.parser").name == "marked.parser"
        assert get_logger("marked").name == "marked"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger(__name__), logging.Logger)


class TestStringBuilder:
    def test_append_chain(self) -> None:
        sb = StringBuilder()
        sb.append("<hr />").append("\n")
        assert sb.build() == "<hr />\n"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("").append("a").append("").append("b")
        assert sb.build() == "ab"

    def test_empty_builder(self) -> None:
        assert StringBuilder().build() == ""
