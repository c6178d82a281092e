"""
Pydantic models for converter settings and conversion results.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


# ─── Direction ───────────────────────────────────────────────────────


class Direction(str, Enum):
    """Which way a conversion went."""

    TO_WORDS = "TO_WORDS"  # "42" → "forty-two"
    TO_NUMBER = "TO_NUMBER"  # "forty-two" → 42


# ─── Settings ────────────────────────────────────────────────────────


class ConverterSettings(BaseModel):
    """Behaviour switches for a Numtext converter."""

    model_config = ConfigDict(frozen=True)

    ignore_case: bool = False  # Lowercase phrases before parsing
    strip_output: bool = False  # Trim whitespace around rendered phrases


# ─── Result ──────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """A single conversion, with the route it took."""

    input: str
    direction: Direction
    output: Union[int, str]
