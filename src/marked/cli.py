"""Command-line interface for inspecting how Mark text parses.

By default the original text, the AST (as indented JSON) and the rendered
output are all printed, each followed by a blank line. Flags turn the
sections off.

Usage:
    marked notes/todo.mk
    marked -o -a notes/todo.mk          # HTML only
    cat note.mk | marked --format mark -   # normalised Mark source
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from marked import __version__, parse
from marked.config import ParseConfig
from marked.renderers import ASTRenderer, HtmlRenderer, MarkRenderer
from marked.serialization import to_json
from marked.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marked",
        description="Parse a Mark file and print its text, AST and rendering.",
    )
    parser.add_argument("input", metavar="INPUT", help="Input file to use ('-' for stdin)")
    parser.add_argument(
        "-o", "--skip-original", action="store_true", help="Skip printing original text"
    )
    parser.add_argument("-a", "--skip-ast", action="store_true", help="Skip printing AST")
    parser.add_argument(
        "-s", "--skip-html", action="store_true", help="Skip printing rendered output"
    )
    parser.add_argument(
        "--format",
        choices=("html", "mark"),
        default="html",
        help="Rendered output format (default: html)",
    )
    parser.add_argument(
        "--no-numbering-styles",
        action="store_true",
        help="Omit the type attribute on ordered lists",
    )
    parser.add_argument(
        "--no-setext", action="store_true", help="Treat setext underlines as plain text"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).expanduser().read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        contents = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"marked: cannot read {args.input}: {e}", file=sys.stderr)
        return 1
    logger.debug("Read %d chars from %s", len(contents), args.input)

    config = ParseConfig(setext_headers=not args.no_setext)
    source_file = None if args.input == "-" else args.input
    doc = parse(contents, source_file=source_file, config=config)

    if not args.skip_original:
        print(f"{contents}\n")
    if not args.skip_ast:
        print(f"{to_json(doc, indent=2)}\n")
    if not args.skip_html:
        renderer: ASTRenderer
        if args.format == "mark":
            renderer = MarkRenderer()
        else:
            renderer = HtmlRenderer(numbering_styles=not args.no_numbering_styles)
        print(f"{renderer.render(doc)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
