"""
Render a decimal digit string as English words.

    "21"      → "twenty-one"
    "105"     → "one hundred and five"
    "1234"    → "one thousand , two hundred and thirty-four"
    "1000000" → "one million "

The digit string is split recursively: a leading group of up to three digits
carries the largest denomination label, and the remainder is rendered on its
own. Whitespace left over from concatenation is kept as-is so the output is
stable across releases.
"""

from __future__ import annotations

from typing import Optional

from .exceptions import MalformedInputError, UnsupportedMagnitudeError
from .lexicon import DEFAULT_LEXICON, MAX_DIGITS, Lexicon


def render(digits: str, lexicon: Optional[Lexicon] = None) -> str:
    """Convert a string of decimal digits to its English form.

    Raises:
        MalformedInputError: If `digits` is empty or holds non-digit characters.
        UnsupportedMagnitudeError: If the number has more than 18 digits.
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise MalformedInputError(
            f"Expected a string of decimal digits, got {digits!r}",
            {"input": digits},
        )
    if len(digits) > MAX_DIGITS:
        raise UnsupportedMagnitudeError(digits, MAX_DIGITS)
    # "0042" renders like "42"; a zero leading group would otherwise read "zero thousand"
    return _render(digits.lstrip("0") or "0", lexicon or DEFAULT_LEXICON)


def render_int(n: int, lexicon: Optional[Lexicon] = None) -> str:
    """Like `render`, for a Python int."""
    if n < 0:
        raise MalformedInputError(f"Negative numbers are not supported: {n}", {"input": n})
    return render(str(n), lexicon)


# ─── Recursive Cases ─────────────────────────────────────────────────


def _render(digits: str, lexicon: Lexicon) -> str:
    value = int(digits)
    if lexicon.is_fundamental(value):
        return lexicon.words[value]

    if len(digits) < 3:
        return _render_tens(digits, lexicon)
    if len(digits) == 3:
        return _render_hundreds(digits, lexicon)
    return _render_denominations(digits, lexicon)


def _render_tens(digits: str, lexicon: Lexicon) -> str:
    """Two-digit numbers without a word of their own: "twenty-one"."""
    tens = int(digits[0]) * 10
    return _render(str(tens), lexicon) + "-" + _render(digits[1], lexicon)


def _render_hundreds(digits: str, lexicon: Lexicon) -> str:
    first = digits[0]
    rem = int(digits) - int(first) * 100

    if first == "0":
        return _render(str(rem), lexicon)

    text = _render(first, lexicon) + " hundred "
    if rem != 0:
        text += "and " + _render(str(rem), lexicon)
    return text


def _render_denominations(digits: str, lexicon: Lexicon) -> str:
    """Numbers of four or more digits, grouped by thousand, million, ..."""
    if len(digits) % 3:
        width = len(digits) + 3 - len(digits) % 3
        digits = digits.zfill(width)

    label = lexicon.label_for_width(digits)
    head, tail = digits[:3], digits[3:]

    text = _render(head, lexicon) + " " + label + " "

    rem = int(tail)
    if rem >= 100:
        text += ", " + _render(str(rem), lexicon)
    elif rem != 0:
        text += "and " + _render(str(rem), lexicon)
    return text
