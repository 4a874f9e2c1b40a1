"""Example-based rendering tests for Mark documents.

Each example in fixtures/mark_examples.json pairs a Mark source with the
HTML it must render to. Trailing whitespace is ignored on both sides.

Usage:
# Run all examples
pytest tests/test_mark_examples.py -v

# Run one section
pytest tests/test_mark_examples.py -k "Lists"

# Run single example
pytest tests/test_mark_examples.py -k "example_012"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from marked import format_mark, parse, render

if TYPE_CHECKING:
    from typing import Any


EXAMPLES_PATH = Path(__file__).parent / "fixtures" / "mark_examples.json"

EXAMPLES: list[dict[str, Any]] = json.loads(EXAMPLES_PATH.read_text(encoding="utf-8"))


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize tests taking an ``example`` argument over the fixture file."""
    if "example" in metafunc.fixturenames:
        metafunc.parametrize(
            "example",
            EXAMPLES,
            ids=[f"example_{e['example']:03d}_{e['section'].replace(' ', '_')}" for e in EXAMPLES],
        )


def test_example_renders(example: dict[str, Any]) -> None:
    html = render(parse(example["mark"]))
    assert html.rstrip() == example["html"].rstrip(), (
        f"Example {example['example']} ({example['section']})\n"
        f"Input:\n{example['mark']!r}"
    )


def test_example_survives_formatting(example: dict[str, Any]) -> None:
    """Formatting an example as Mark and rendering it again gives the same HTML."""
    formatted = format_mark(parse(example["mark"]))
    assert render(parse(formatted)).rstrip() == example["html"].rstrip()


def test_examples_cover_every_section() -> None:
    sections = {e["section"] for e in EXAMPLES}
    assert sections == {
        "Paragraphs",
        "Headers",
        "Thematic breaks",
        "Fenced code",
        "Blockquotes",
        "Lists",
    }
