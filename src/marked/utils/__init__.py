"""Utility modules for Marked.

Provides:
- text: html_escape and indentation helpers
- logger: get_logger for logging
"""

from marked.utils.logger import configure_logging, get_logger
from marked.utils.text import expand_indent, has_indent, html_escape, strip_columns

__all__ = [
    "configure_logging",
    "expand_indent",
    "get_logger",
    "has_indent",
    "html_escape",
    "strip_columns",
]
