"""Test unterminated blocks at EOF - ensures content isn't silently lost.

A fence that is never closed runs to the end of its container: the end
of the document, or the end of the blockquote or list item it was opened
in. Its content must be kept and the rest of the document parsed as usual.
"""

import logging

import pytest

from marked import parse
from marked.lexer import Lexer
from marked.location import SourceLocation
from marked.nodes import Blockquote, CodeBlock, List, ListItem, Paragraph
from marked.tokens import TokenType

LOC = SourceLocation.unknown()


class TestUnterminatedFenceTokens:
    """Lexer-level behaviour for fences without a closing line."""

    @pytest.mark.parametrize("fence", ["```", "~~~", "`````"])
    def test_content_tokens_emitted(self, fence: str) -> None:
        tokens = list(Lexer.from_source(f"{fence}\nline 1\nline 2").tokenize())
        content = [t.value for t in tokens if t.type == TokenType.FENCED_CODE_CONTENT]
        assert content == ["line 1", "line 2"]
        assert tokens[-1].type == TokenType.EOF

    def test_shorter_run_does_not_close(self) -> None:
        tokens = list(Lexer.from_source("````\n```").tokenize())
        assert tokens[1].type == TokenType.FENCED_CODE_CONTENT

    def test_other_fence_char_does_not_close(self) -> None:
        tokens = list(Lexer.from_source("```\n~~~").tokenize())
        assert tokens[1].type == TokenType.FENCED_CODE_CONTENT

    def test_trailing_text_does_not_close(self) -> None:
        tokens = list(Lexer.from_source("```\n``` x").tokenize())
        assert tokens[1].type == TokenType.FENCED_CODE_CONTENT


class TestUnterminatedFenceBlocks:
    """Parser-level behaviour for fences without a closing line."""

    def test_top_level_fence_runs_to_end(self) -> None:
        doc = parse("```\na\n\nb")
        assert doc.children == (CodeBlock(location=LOC, language=None, lines=("a", "", "b")),)

    def test_trailing_blank_lines_are_content(self) -> None:
        doc = parse("```\na\n\n")
        assert doc.children[0].lines == ("a", "")

    def test_fence_only(self) -> None:
        doc = parse("```rust")
        assert doc.children == (CodeBlock(location=LOC, language="rust", lines=()),)

    def test_fence_in_blockquote_ends_with_quote(self) -> None:
        doc = parse("> ```\n> a\nb")
        assert doc.children == (
            Blockquote(
                location=LOC,
                children=(CodeBlock(location=LOC, language=None, lines=("a",)),),
            ),
            Paragraph(location=LOC, lines=("b",)),
        )

    def test_fence_in_list_item_ends_with_item(self) -> None:
        doc = parse("- ```\n  a\n- b")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert lst.items == (
            ListItem(
                location=LOC,
                children=(CodeBlock(location=LOC, language=None, lines=("a",)),),
            ),
            ListItem(location=LOC, children=(Paragraph(location=LOC, lines=("b",)),)),
        )

    def test_unterminated_fence_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="marked"):
            parse("text\n\n~~~\ncode")
        assert "closed at end of input" in caplog.text

    def test_closed_fence_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="marked"):
            parse("~~~\ncode\n~~~")
        assert "closed at end of input" not in caplog.text
