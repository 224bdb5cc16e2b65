"""Base exceptions shared across fretwise.

The theory layer reports lookup misses with ``None``, empty collections or
the ``NOT_FOUND`` fret sentinel. The exceptions here are reserved for
malformed text and programming errors.
"""

from __future__ import annotations

from typing import Any


class MatchException(Exception):
    """Exception raised when pattern matching fails."""

    def __init__(self, value: Any) -> None:
        """Initialize a MatchException with the unmatched value.

        Args:
            value: The value that failed to match any pattern.
        """
        super().__init__(f"Failed to match value: {value}")


class ParseError(ValueError):
    """Raised when a note or key name cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse: {text!r}")
        self.text = text


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""
