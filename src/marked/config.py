"""ContextVar-based parse configuration for Marked.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration is set once per parse call and read by every nested
parser created for blockquote and list item content.

Thread Safety:
    Each thread has its own ContextVar storage, so no locks are needed.

Usage:
    # Through the high-level API
    doc = parse(text, config=ParseConfig(setext_headers=False))

    # Direct parser usage
    from marked.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_nesting_depth=8)):
        blocks = Parser.from_source(text).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        setext_headers: Turn a paragraph line followed by ``===``/``---``
            into a header. When off, ``===`` lines stay paragraph text and
            ``---`` lines are thematic breaks.
        max_nesting_depth: Deepest container (blockquote or list item)
            nesting the parser opens. Deeper markers are kept as paragraph
            text, so hostile input cannot exhaust the interpreter stack.

    """

    setext_headers: bool = True
    max_nesting_depth: int = 64

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"setext_headers": False, "theme": "dark"})
            >>> config.setext_headers
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "marked_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(setext_headers=False)):
        ...     blocks = Parser.from_source("Title\\n===").parse()
        >>> # Previous config restored here

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
