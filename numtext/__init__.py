"""
Numtext — English words for integers up to the quadrillions, and back again.

    convert("1001")                   → "one thousand and one"
    convert("one thousand and one")   → 1001
"""

from .converter import Numtext, convert
from .exceptions import (
    InvalidInputError,
    MalformedInputError,
    UnknownWordError,
    UnsupportedMagnitudeError,
)
from .lexicon import Lexicon
from .parser import parse
from .renderer import render, render_int
from .tokenizer import tokenize

__version__ = "1.0.0"

__all__ = [
    "InvalidInputError",
    "Lexicon",
    "MalformedInputError",
    "Numtext",
    "UnknownWordError",
    "UnsupportedMagnitudeError",
    "convert",
    "parse",
    "render",
    "render_int",
    "tokenize",
]
