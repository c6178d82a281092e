"""
Custom exception hierarchy for number conversion.

Each exception type maps to a specific category of conversion failure,
so callers can tell bad input apart from input we simply do not support.
"""

from __future__ import annotations


class InvalidInputError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MalformedInputError(InvalidInputError):
    """The input is empty or is not a well-formed numeral or phrase."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_INPUT", message, details)


class UnknownWordError(InvalidInputError):
    """A phrase contains a word that is not a number word, label or connector."""

    def __init__(self, word: str, phrase: str):
        super().__init__(
            "UNKNOWN_WORD",
            f"Unrecognized number word: {word!r} in {phrase!r}",
            {"word": word, "phrase": phrase},
        )
        self.word = word


class UnsupportedMagnitudeError(InvalidInputError):
    """The numeral is larger than the biggest supported denomination."""

    def __init__(self, digits: str, max_digits: int):
        super().__init__(
            "UNSUPPORTED_MAGNITUDE",
            f"{len(digits)}-digit number exceeds the {max_digits}-digit maximum",
            {"digits": digits, "max_digits": max_digits},
        )
