"""
Dispatcher — decides which way a value converts.

    convert("42")          → "forty-two"
    convert("1,250,000")   → "one million , two hundred and fifty thousand "
    convert("forty-two")   → 42

Routing is purely on form: a plain (or comma-grouped) digit string is
rendered as words, anything else is parsed as a phrase. Signed and
fractional numerals are rejected rather than parsed, since the tokenizer
would otherwise read "-5" as "five".
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .config import load_settings
from .exceptions import MalformedInputError
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import ConversionResult, ConverterSettings, Direction
from .parser import parse
from .renderer import render

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_GROUPED_DIGITS = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})+")
_SIGNED_OR_FRACTIONAL = re.compile(r"[+-]\s*[0-9.,]*[0-9][0-9.,]*|[0-9,]*\.[0-9]+|[0-9,]+\.")


class Numtext:
    """Converts numbers to English words and back.

    Usage:
        converter = Numtext()
        converter.convert("1001")                    # "one thousand and one"
        converter.convert("one thousand and one")    # 1001
    """

    def __init__(
        self,
        settings: Optional[ConverterSettings] = None,
        lexicon: Optional[Lexicon] = None,
    ):
        self.settings = settings or ConverterSettings()
        self.lexicon = lexicon or DEFAULT_LEXICON

    def convert(self, value: Union[str, int]) -> Union[str, int]:
        """Return the other form of `value`: words for digits, an int for words.

        Raises:
            MalformedInputError: Empty input, or a signed/fractional numeral.
            UnknownWordError: A phrase word is not a number word.
            UnsupportedMagnitudeError: The number has more than 18 digits.
        """
        return self.describe(value).output

    def describe(self, value: Union[str, int]) -> ConversionResult:
        """Convert `value` and report which direction the conversion took."""
        text = self._normalize(value)

        digits = self._as_digits(text)
        if digits is not None:
            logger.debug("Routing %r to renderer", text)
            return ConversionResult(
                input=text, direction=Direction.TO_WORDS, output=self.to_words(digits)
            )

        logger.debug("Routing %r to parser", text)
        return ConversionResult(
            input=text, direction=Direction.TO_NUMBER, output=self.to_number(text)
        )

    def to_words(self, value: Union[str, int]) -> str:
        """Render digits (or an int) as English words."""
        text = self._normalize(value)
        digits = self._as_digits(text)
        if digits is None:
            raise MalformedInputError(f"Not a non-negative integer: {text!r}", {"input": text})

        words = render(digits, self.lexicon)
        return words.strip() if self.settings.strip_output else words

    def to_number(self, phrase: str) -> int:
        """Parse an English phrase into an int."""
        if self.settings.ignore_case:
            phrase = phrase.lower()
        return parse(phrase, self.lexicon)

    # ─── Input Classification ───────────────────────────────────────

    @staticmethod
    def _normalize(value: Union[str, int]) -> str:
        if isinstance(value, bool):
            raise MalformedInputError(f"Expected a number or phrase, got {value!r}", {"input": value})
        if isinstance(value, int):
            if value < 0:
                raise MalformedInputError(f"Negative numbers are not supported: {value}", {"input": value})
            return str(value)

        text = value.strip()
        if not text:
            raise MalformedInputError("Empty input cannot be converted", {"input": value})
        return text

    @staticmethod
    def _as_digits(text: str) -> Optional[str]:
        """Bare digits for a numeral, None for a phrase."""
        if _DIGITS.fullmatch(text):
            return text
        if _GROUPED_DIGITS.fullmatch(text):
            return text.replace(",", "")
        if _SIGNED_OR_FRACTIONAL.fullmatch(text):
            raise MalformedInputError(
                f"Only non-negative whole numbers are supported: {text!r}",
                {"input": text},
            )
        return None


_default: Optional[Numtext] = None


def convert(value: Union[str, int]) -> Union[str, int]:
    """Convert with a shared Numtext configured from the environment."""
    global _default  # noqa: PLW0603
    if _default is None:
        _default = Numtext(load_settings())
    return _default.convert(value)
