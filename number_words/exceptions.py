"""
Exception hierarchy for number conversion.

Each exception carries a machine-readable code. The converter catches them
at its boundary and returns the language's localised message instead, so
callers of ``convert_to_words`` never see a raised error.
"""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class NotANumberError(NumberWordsError):
    """The cleaned input does not parse as a finite number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_A_NUMBER", message, details)


class MagnitudeExceededError(NumberWordsError):
    """The absolute value is 10^15 or more (beyond the trillions)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMBER_TOO_LARGE", message, details)
