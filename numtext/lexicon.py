"""
Word tables shared by the renderer and the parser.

Three tables drive every conversion:
  - fundamentals:  the 28 numbers with a word of their own (0-20, 30..90)
  - denominations: label -> power of ten applied to the group before it
  - width labels:  padded digit count -> label of its leading 3-digit group

The width table is derived from the denomination table, never typed by hand,
so the two cannot drift apart.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import UnsupportedMagnitudeError

# ─── Word Tables ─────────────────────────────────────────────────────

_FUNDAMENTAL_WORDS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

_FUNDAMENTAL_VALUES: tuple[int, ...] = tuple(range(21)) + tuple(range(30, 100, 10))

# Accepted when parsing, never produced when rendering
_LEGACY_SPELLINGS: dict[str, int] = {
    "fourty": 40,
}

_DENOMINATIONS: dict[str, int] = {
    "hundred": 2,
    "thousand": 3,
    "million": 6,
    "billion": 9,
    "trillion": 12,
    "quadrillion": 15,
}

CONNECTOR = "and"
MAX_DIGITS = 18


# ─── Lexicon ─────────────────────────────────────────────────────────


class Lexicon:
    """Read-only lookup tables for English number words.

    Instances never change after construction and can be shared freely
    between threads.
    """

    def __init__(self) -> None:
        if len(_FUNDAMENTAL_VALUES) != len(_FUNDAMENTAL_WORDS):
            raise ValueError("Fundamental value and word tables are out of sync")

        self.words: Mapping[int, str] = MappingProxyType(
            dict(zip(_FUNDAMENTAL_VALUES, _FUNDAMENTAL_WORDS))
        )
        values = {word: value for value, word in self.words.items()}
        values.update(_LEGACY_SPELLINGS)
        self.values: Mapping[str, int] = MappingProxyType(values)

        self.powers: Mapping[str, int] = MappingProxyType(dict(_DENOMINATIONS))
        self.width_labels: Mapping[int, str] = MappingProxyType(
            _derive_width_labels(_DENOMINATIONS)
        )

    # ── Fundamentals ────────────────────────────────────────────────

    def word_for(self, n: int) -> Optional[str]:
        return self.words.get(n)

    def value_for(self, word: str) -> Optional[int]:
        return self.values.get(word)

    def is_fundamental(self, n: int) -> bool:
        return n in self.words

    # ── Denominations ───────────────────────────────────────────────

    def is_label(self, word: str) -> bool:
        return word in self.powers

    def power_of(self, label: str) -> int:
        return self.powers[label]

    def label_for_width(self, digits: str) -> str:
        """Label governing the leading group of a zero-padded digit string.

        Raises:
            UnsupportedMagnitudeError: If no denomination covers that width.
        """
        label = self.width_labels.get(len(digits))
        if label is None:
            raise UnsupportedMagnitudeError(digits.lstrip("0") or digits, MAX_DIGITS)
        return label

    def is_known(self, word: str) -> bool:
        """True for number words, denomination labels and the connector."""
        return word in self.values or word in self.powers or word == CONNECTOR


def _derive_width_labels(powers: Mapping[str, int]) -> dict[int, str]:
    """Map padded widths to labels: thousand (10^3) leads a 6-digit string, etc."""
    ordered = sorted(powers.items(), key=lambda item: item[1])
    exponents = [exponent for _, exponent in ordered]
    if len(set(exponents)) != len(exponents):
        raise ValueError("Denomination exponents must be distinct")

    widths: dict[int, str] = {}
    for label, exponent in ordered:
        if label == "hundred":
            continue
        if exponent % 3:
            raise ValueError(f"Denomination {label!r} has exponent {exponent}, not a multiple of 3")
        widths[exponent + 3] = label
    return widths


DEFAULT_LEXICON = Lexicon()
