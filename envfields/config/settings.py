"""Defaults shared by the typed accessors and their request models."""

from __future__ import annotations

DEFAULT_MIN_VALUE = 0
DEFAULT_BOOLEAN = False
DEFAULT_DATE_FORMAT_MASK = "YYYY-MM-DD"
DEFAULT_DELIMITER = ","

# Two-digit years up to this value land in the 2000s, the rest in the 1900s.
TWO_DIGIT_YEAR_PIVOT = 68
