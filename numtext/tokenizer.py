"""Split an English number phrase into word tokens."""

from __future__ import annotations

from typing import Optional

from .lexicon import DEFAULT_LEXICON, Lexicon
from .renderer import render


def tokenize(phrase: str, lexicon: Optional[Lexicon] = None) -> list[str]:
    """Break a phrase into words, spelling out any embedded numerals.

    Hyphens and commas count as whitespace, so "twenty-one" and
    "one thousand, five" split the same way as their spaced forms.
    A numeral such as the "20" in "20 thousand" is rendered and its words
    spliced in place: ["twenty", "thousand"].
    """
    lexicon = lexicon or DEFAULT_LEXICON
    words = phrase.replace("-", " ").replace(",", " ").split()

    tokens: list[str] = []
    for word in words:
        if word.isascii() and word.isdigit():
            tokens.extend(tokenize(render(word, lexicon), lexicon))
        else:
            tokens.append(word)
    return tokens
