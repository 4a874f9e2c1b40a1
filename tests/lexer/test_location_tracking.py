"""Tests for accurate source location tracking.

Token locations come from the line they were lexed from. Nodes nested in
blockquotes and list items are parsed from stripped lines, but their
locations must still point into the original source.
"""

from marked import parse
from marked.lexer import Lexer
from marked.nodes import Blockquote, CodeBlock, List, Paragraph


class TestTokenLocations:
    """Test location tracking for single-line tokens."""

    def test_paragraph_location(self) -> None:
        token = Lexer.from_source("paragraph text").next_token()
        assert token.location.lineno == 1
        assert token.location.col_offset == 1

    def test_indented_line_location(self) -> None:
        token = Lexer.from_source("   indented").next_token()
        assert token.location.col_offset == 4

    def test_tab_indent_counts_four_columns(self) -> None:
        token = Lexer.from_source("\tx").next_token()
        assert token.location.col_offset == 5

    def test_line_numbers_advance(self) -> None:
        tokens = list(Lexer.from_source("a\n\nb").tokenize())
        assert [t.location.lineno for t in tokens] == [1, 2, 3, 4]


class TestNodeLocations:
    """Test locations of parsed nodes."""

    def test_node_starts_where_its_first_token_does(self) -> None:
        source = "\tindented\nmore"
        token = Lexer.from_source(source).next_token()
        loc = parse(source, source_file="n.mk").children[0].location
        assert (loc.lineno, loc.col_offset) == (token.location.lineno, token.location.col_offset)
        assert (loc.end_lineno, loc.source_file) == (2, "n.mk")

    def test_top_level_blocks(self) -> None:
        doc = parse("one\n\n---\n\n```\nx\n```")
        para, hr, code = doc.children
        assert (para.location.lineno, para.location.end_lineno) == (1, 1)
        assert hr.location.lineno == 3
        assert (code.location.lineno, code.location.end_lineno) == (5, 7)

    def test_multiline_paragraph_span(self) -> None:
        para = parse("a\nb\nc").children[0]
        assert para.location.lineno == 1
        assert para.location.end_lineno == 3

    def test_setext_header_spans_underline(self) -> None:
        para, header = parse("intro\nTitle\n===").children
        assert para.location.end_lineno == 1
        assert header.location.lineno == 2
        assert header.location.end_lineno == 3

    def test_document_location_covers_source(self) -> None:
        doc = parse("a\nb\n\nc\n")
        assert doc.location.lineno == 1
        assert doc.location.end_lineno == 4

    def test_empty_document_location(self) -> None:
        assert parse("").location.end_lineno == 1

    def test_blockquote_children_keep_source_columns(self) -> None:
        doc = parse("a\n\n> b\n>   - c")
        quote = doc.children[1]
        assert isinstance(quote, Blockquote)
        assert (quote.location.lineno, quote.location.col_offset) == (3, 1)
        assert quote.location.end_lineno == 4

        para, lst = quote.children
        assert (para.location.lineno, para.location.col_offset) == (3, 3)
        assert isinstance(lst, List)
        assert (lst.location.lineno, lst.location.col_offset) == (4, 5)

        inner = lst.items[0].children[0]
        assert isinstance(inner, Paragraph)
        assert (inner.location.lineno, inner.location.col_offset) == (4, 7)

    def test_list_item_spans_continuation(self) -> None:
        lst = parse("- a\n\n  b\n- c").children[0]
        assert isinstance(lst, List)
        first, second = lst.items
        assert (first.location.lineno, first.location.end_lineno) == (1, 3)
        assert second.location.lineno == 4
        assert (lst.location.lineno, lst.location.end_lineno) == (1, 4)

    def test_nested_code_block_location(self) -> None:
        lst = parse("- x\n\n  ```\n  y\n  ```").children[0]
        code = lst.items[0].children[1]
        assert isinstance(code, CodeBlock)
        assert (code.location.lineno, code.location.col_offset) == (3, 3)
        assert code.location.end_lineno == 5

    def test_source_file_is_recorded(self) -> None:
        doc = parse("> x", source_file="notes/todo.mk")
        assert doc.location.source_file == "notes/todo.mk"
        assert doc.children[0].location.source_file == "notes/todo.mk"
        assert doc.children[0].children[0].location.source_file == "notes/todo.mk"
        assert str(doc.children[0].location) == "notes/todo.mk:1:1"
