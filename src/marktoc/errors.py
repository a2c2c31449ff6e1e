"""Exception classes for marktoc.

Construction of a table of contents is error-free for any text the parser
accepts. These exceptions cover the two places where input can still be
rejected: a hand-built event stream that cannot be interpreted, and invalid
rendering options.
"""

from __future__ import annotations


class MarktocError(Exception):
    """Base exception for all marktoc errors."""

    pass


class EventStreamError(MarktocError):
    """Event stream cannot be interpreted as a sequence of headings.

    Raised when a heading end arrives without a matching start, or when the
    stream is exhausted while a heading is still open.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize event stream error.

        Args:
            message: Error description
            index: Position of the offending event in the stream (0-indexed)
        """
        self.message = message
        self.index = index

        location = f"event {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")


class ConfigError(MarktocError):
    """Invalid configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"Option '{field_name}': {message}")
