"""Exception hierarchy for datespin.

Argument errors are fatal to the call that raised them; parse errors are
recoverable by the caller (typically shown as "invalid input").
"""

from __future__ import annotations

from typing import Any


class DatespinError(Exception):
    """Base exception for all datespin errors."""

    code = "DATESPIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgument(DatespinError, ValueError):
    """A required argument is absent, of the wrong type, or out of bounds."""

    code = "INVALID_ARGUMENT"


class PatternError(InvalidArgument):
    """A canonical text pattern could not be compiled."""

    code = "INVALID_PATTERN"


class ParseError(DatespinError, ValueError):
    """Text matched neither the full date-time nor the date-only pattern.

    Attributes:
        text: The text that failed to parse.
        error_index: Best-effort character offset of the failure.
    """

    code = "PARSE_ERROR"

    def __init__(self, message: str, text: str, error_index: int) -> None:
        super().__init__(message, details={"text": text, "error_index": error_index})
        self.text = text
        self.error_index = error_index
