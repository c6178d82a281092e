"""
Converter settings from the environment.

Variables (a `.env` file in the working directory is loaded first):
    NUMTEXT_IGNORE_CASE   accept "Forty Two" as well as "forty two"
    NUMTEXT_STRIP_OUTPUT  trim whitespace around rendered phrases

Truthy values are "1", "true", "yes" and "on" (any case).
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from .models import ConverterSettings

logger = logging.getLogger(__name__)

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


def load_settings(**overrides: bool) -> ConverterSettings:
    """Build settings from the environment; keyword overrides win."""
    load_dotenv()

    values: dict[str, bool] = {}
    for field_name in ConverterSettings.model_fields:
        raw = os.environ.get(f"NUMTEXT_{field_name.upper()}")
        if raw is not None:
            values[field_name] = raw.strip().lower() in _TRUTHY

    values.update(overrides)
    settings = ConverterSettings(**values)
    logger.debug("Loaded converter settings: %s", settings)
    return settings
