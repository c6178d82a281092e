"""
Convert an English number phrase back to an integer.

Supported patterns:
    "forty-two"                                          → 42
    "one thousand , two hundred and thirty-four"         → 1,234
    "one hundred and two thousand three hundred and four" → 102,304
    "twenty five thousand"                               → 25,000
    "20 thousand"                                        → 20,000

Algorithm:
    The phrase is tokenized, then scanned left to right with a cursor `i`
    and a running `total`. Each step reads one subunit into `temp`, looking
    up to two tokens ahead for denomination labels:

    - next token is a label ("six thousand"):
        temp = value * 10^label
        - "X hundred and Y Z ... <label>": Y, Z, ... are folded into the
          hundreds group, and the whole group is scaled by the label that
          ends it, so "one hundred and two thousand" is (100 + 2) * 1000
        - a second label right after ("one hundred thousand"): scale again
    - otherwise the token is a plain number, unless it starts a split
      compound before a label ("twenty five thousand" → (20 + 5) * 1000)

    An "and" left over after a subunit is a plain separator and is skipped.
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import MalformedInputError, UnknownWordError
from .lexicon import CONNECTOR, DEFAULT_LEXICON, Lexicon
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse(phrase: str, lexicon: Optional[Lexicon] = None) -> int:
    """Convert an English number phrase to an int.

    Raises:
        MalformedInputError: If the phrase is empty or has no words.
        UnknownWordError: If a word is not a number word, label or "and".
        UnsupportedMagnitudeError: If an embedded numeral is too large.
    """
    lexicon = lexicon or DEFAULT_LEXICON

    if not phrase or not phrase.strip():
        raise MalformedInputError("Empty text cannot be converted to a number")

    direct = lexicon.value_for(phrase.strip())
    if direct is not None:
        return direct

    parts = tokenize(phrase, lexicon)
    if not parts:
        raise MalformedInputError(f"No number words found in: {phrase!r}", {"input": phrase})

    for word in parts:
        if not lexicon.is_known(word):
            raise UnknownWordError(word, phrase)

    total = _scan(parts, lexicon)
    logger.debug("Parsed %r as %d from tokens %s", phrase, total, parts)
    return total


# ─── Token Scanner ───────────────────────────────────────────────────


def _scan(parts: list[str], lexicon: Lexicon) -> int:
    total = 0
    i = 0
    n = len(parts)

    while i < n:
        curr = parts[i]

        if i + 1 < n and lexicon.is_label(parts[i + 1]):
            label = parts[i + 1]
            temp = _value(curr, lexicon) * 10 ** lexicon.power_of(label)

            if i + 2 < n and label == "hundred" and parts[i + 2] == CONNECTOR:
                # "X hundred and Y ..." up to the next label or the end
                i += 3
                while i < n and not lexicon.is_label(parts[i]):
                    temp += _value(parts[i], lexicon)
                    i += 1
                if i < n:
                    temp *= 10 ** lexicon.power_of(parts[i])
            elif i + 2 < n and lexicon.is_label(parts[i + 2]):
                temp *= 10 ** lexicon.power_of(parts[i + 2])
                i += 2
            else:
                i += 1
        else:
            temp = _value(curr, lexicon)
            if (
                i + 2 < n
                and parts[i + 1] != CONNECTOR
                and lexicon.is_label(parts[i + 2])
            ):
                temp = (temp + _value(parts[i + 1], lexicon)) * 10 ** lexicon.power_of(parts[i + 2])
                i += 2

        # A connector after a complete subunit only separates it from the next
        if i + 1 < n and parts[i + 1] == CONNECTOR:
            i += 1

        total += temp
        i += 1

    return total


def _value(word: str, lexicon: Lexicon) -> int:
    """Numeric value of a single token.

    "and" is worth nothing; a bare label such as "thousand" means one of it.
    """
    if word == CONNECTOR:
        return 0
    if lexicon.is_label(word):
        return 10 ** lexicon.power_of(word)
    return lexicon.values[word]
