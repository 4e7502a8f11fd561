"""Date format masks such as ``YYYY-MM-DD``.

A mask is compiled once into an anchored regular expression plus the list of
date components its groups capture. Matching a value then means a full
regex match followed by a calendar check through :class:`datetime.datetime`,
so ``2024-02-30`` is rejected even though it has the right shape.

Supported tokens::

    YYYY  four digit year        YY  two digit year
    MM    two digit month        M   one or two digit month
    DD    two digit day          D   one or two digit day
    HH    two digit hour         H   one or two digit hour
    mm    two digit minute       m   one or two digit minute
    ss    two digit second       s   one or two digit second

Text wrapped in ``[...]`` and every other character is matched literally.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Dict, Tuple

from .settings import TWO_DIGIT_YEAR_PIVOT

_TOKEN_PATTERN = re.compile(r"\[[^\]]*\]|YYYY|YY|MM|M|DD|D|HH|H|mm|m|ss|s")

_TOKENS: Dict[str, Tuple[str, str]] = {
    "YYYY": ("year", r"([0-9]{4})"),
    "YY": ("short_year", r"([0-9]{2})"),
    "MM": ("month", r"([0-9]{2})"),
    "M": ("month", r"([0-9]{1,2})"),
    "DD": ("day", r"([0-9]{2})"),
    "D": ("day", r"([0-9]{1,2})"),
    "HH": ("hour", r"([0-9]{2})"),
    "H": ("hour", r"([0-9]{1,2})"),
    "mm": ("minute", r"([0-9]{2})"),
    "m": ("minute", r"([0-9]{1,2})"),
    "ss": ("second", r"([0-9]{2})"),
    "s": ("second", r"([0-9]{1,2})"),
}

# Components missing from a mask are filled from 2000-01-01 00:00:00.
_BASELINE: Dict[str, int] = {"year": 2000, "month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0}


@dataclass(frozen=True)
class DateMask:
    mask: str
    pattern: re.Pattern[str]
    components: Tuple[str, ...]

    def matches(self, value: object) -> bool:
        """Return True when ``value`` is a string that fits the mask and names a real date."""
        if not isinstance(value, str):
            return False
        match = self.pattern.fullmatch(value)
        if match is None:
            return False

        parts: Dict[str, int] = {}
        for component, text in zip(self.components, match.groups()):
            number = int(text)
            if component == "short_year":
                component = "year"
                number += 2000 if number <= TWO_DIGIT_YEAR_PIVOT else 1900
            # A mask may repeat a component; every occurrence has to agree.
            if parts.setdefault(component, number) != number:
                return False

        fields = {**_BASELINE, **parts}
        try:
            datetime(
                fields["year"],
                fields["month"],
                fields["day"],
                fields["hour"],
                fields["minute"],
                fields["second"],
            )
        except ValueError:
            return False
        return True


@lru_cache(maxsize=64)
def compile_mask(mask: str) -> DateMask:
    pieces = []
    components = []
    position = 0
    for token in _TOKEN_PATTERN.finditer(mask):
        pieces.append(re.escape(mask[position : token.start()]))
        text = token.group(0)
        if text.startswith("["):
            pieces.append(re.escape(text[1:-1]))
        else:
            component, regex = _TOKENS[text]
            components.append(component)
            pieces.append(regex)
        position = token.end()
    pieces.append(re.escape(mask[position:]))
    return DateMask(mask=mask, pattern=re.compile("".join(pieces)), components=tuple(components))


def is_valid_date_string(value: object, mask: str) -> bool:
    return compile_mask(mask).matches(value)
