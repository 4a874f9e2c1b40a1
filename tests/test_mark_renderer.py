"""Tests for MarkRenderer, the canonical Mark formatter."""

import pytest

from marked import format_mark, parse


class TestCanonicalForm:
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("", ""),
            ("hello", "hello\n"),
            ("  a  \n\tb", "a\nb\n"),
            ("a\n\n\n\nb", "a\n\nb\n"),
            ("Hi\n===", "Hi\n===\n"),
            ("Long title\n---", "Long title\n----------\n"),
            ("***", "---\n"),
            ("a\n\n* * *\n\nb", "a\n\n---\n\nb\n"),
            (">", ">\n"),
            (">a\n>\n>b", "> a\n>\n> b\n"),
            ("> > a", "> > a\n"),
        ],
    )
    def test_blocks(self, source: str, expected: str) -> None:
        assert format_mark(parse(source)) == expected

    def test_paragraph_then_header(self) -> None:
        assert format_mark(parse("intro\nTitle\n===")) == "intro\n\nTitle\n=====\n"

    def test_continuation_header_stays_attached(self) -> None:
        assert format_mark(parse("a\nb. x\n===")) == "a\nb. x\n====\n"


class TestListFormatting:
    def test_bullets_kept(self) -> None:
        assert format_mark(parse("* a\n*   b")) == "* a\n* b\n"

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("3. a\n7. b", "3. a\n4. b\n"),
            ("i. x\nv. y", "i. x\nj. y\n"),
            ("i. x\nii. y\nii. z", "i. x\nii. y\niii. z\n"),
            ("b) x\nq) y", "b) x\nc) y\n"),
            ("C. x\nA. y", "C. x\nD. y\n"),
            ("007. x", "7. x\n"),
        ],
    )
    def test_renumbering(self, source: str, expected: str) -> None:
        assert format_mark(parse(source)) == expected

    def test_continuation_indent(self) -> None:
        assert format_mark(parse("10.    a\n       b")) == "10. a\n    b\n"

    def test_loose_list_spaced(self) -> None:
        assert format_mark(parse("- a\n\n  b\n- c")) == "- a\n\n  b\n\n- c\n"

    def test_nested_list(self) -> None:
        assert format_mark(parse("- a\n  - b")) == "- a\n\n  - b\n"

    def test_empty_items(self) -> None:
        assert format_mark(parse("-\n- b")) == "-\n- b\n"

    def test_block_first_child_on_next_line(self) -> None:
        assert format_mark(parse("- ```\n  x\n  ```")) == "-\n  ```\n  x\n  ```\n"
        assert format_mark(parse("- ***")) == "-\n  ---\n"
        assert format_mark(parse("- - x")) == "-\n  - x\n"

    def test_lists_separated(self) -> None:
        assert format_mark(parse("- a\n* b")) == "- a\n\n* b\n"


class TestCodeFormatting:
    def test_language_kept(self) -> None:
        assert format_mark(parse("~~~py\nx\n~~~")) == "```py\nx\n```\n"

    def test_fence_longer_than_content(self) -> None:
        assert format_mark(parse("~~~\n```\n~~~")) == "````\n```\n````\n"

    def test_backtick_language_keeps_backtick_fence(self) -> None:
        assert format_mark(parse("~~~ a`b\nx\n~~~")) == "```a`b\nx\n```\n"

    def test_language_starting_with_backtick(self) -> None:
        assert format_mark(parse("~~~ `x\ny\n~~~")) == "``` `x\ny\n```\n"
        assert parse("``` `x\ny\n```") == parse("~~~ `x\ny\n~~~")

    def test_tilde_language(self) -> None:
        assert format_mark(parse("~~~ ~`\nx\n~~~")) == "```~`\nx\n```\n"

    def test_unterminated_fence_is_closed(self) -> None:
        assert format_mark(parse("```\na")) == "```\na\n```\n"

    def test_code_in_quote(self) -> None:
        assert format_mark(parse("> ```\n> x\n>\n>  y\n> ```")) == "> ```\n> x\n>\n>  y\n> ```\n"


class TestRoundTrip:
    """Parsing the formatted text gives back the same document."""

    @pytest.mark.parametrize(
        "source",
        [
            "Title\n===\n\nBody text\nmore",
            "a\nb. x\n===",
            "x\n\n===\n===",
            "- a\n- b\n\n  c\n- d",
            "i. x\nii. y\n\nv. z",
            "1. a\n1) b\n- c",
            "> - a\n>   ```\n>   code\n>   ```\n> b",
            "-\n\n- b",
            "-      wide\n-\tTab",
            "- ```\n  \t x\n\n  ```",
            "~~~\n````\n~~~\n```",
            "see\n-\n2. two",
            "> > > deep\n> back",
            "```a`b\n``\n```",
            "- ~~~ `x\n  y\n  ~~~",
            "see\ni. one\nii. two\n\ni. one\nii. two",
        ],
    )
    def test_round_trip(self, source: str) -> None:
        doc = parse(source)
        assert parse(format_mark(doc)) == doc

    def test_formatting_is_idempotent(self) -> None:
        source = "Title\n=\n\nb. one\nc. two\n\n> quote\n***"
        once = format_mark(parse(source))
        assert format_mark(parse(once)) == once
