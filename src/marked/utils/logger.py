"""Logging helpers for Marked.

Library modules log through the standard library under the "marked."
namespace and only at DEBUG level; configuring handlers is left to the
application (the ``marked`` CLI does it from ``--verbose``).

Example:
    >>> from marked.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Unterminated fence closed at end of input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "marked." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("lexer")
        >>> logger.name
        'marked.lexer'
    """
    if not (name == "marked" or name.startswith("marked.")):
        name = f"marked.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Configure a console handler for command-line use."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
