"""Shared environment parsing helpers."""

from __future__ import annotations

import math
import os
import re
from decimal import Decimal
from typing import Any, Mapping, Optional

from envfields.errors import InvalidFieldName, MissingValue

EnvSource = Mapping[str, str]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def resolve_env(env: Optional[EnvSource] = None) -> EnvSource:
    """Return the injected environment storage, or the live process environment."""
    if env is None:
        return os.environ
    return env


def guard_field_name(field_name: Any) -> str:
    """Reject names that are missing, empty, or padded with whitespace.

    Internal whitespace is allowed; ``"MY FIELD"`` passes while ``" MY_FIELD"``
    does not.
    """
    if not isinstance(field_name, str) or not field_name or field_name != field_name.strip():
        raise InvalidFieldName(
            field_name,
            "The field name cannot be null and cannot have trailing or leading spaces. "
            f"Field name supplied: ({field_name!r}).",
        )
    return field_name


def get_env(name: str, env: Optional[EnvSource] = None) -> Optional[str]:
    """Fetch the raw value for ``name``.

    Unset variables and variables set to the empty string both come back as
    ``None``. Whitespace-only values are returned untouched.
    """
    value = resolve_env(env).get(name)
    if value is None:
        return None
    value = str(value)
    if not value:
        return None
    return value


def guard_values_are_present(field_name: str, value: Optional[str], default: Any) -> None:
    """Fail with MissingValue when there is neither a raw value nor a default."""
    if value is None and default is None:
        raise MissingValue(
            field_name,
            f"The environment variable {field_name} does not have a default value and is null, "
            "please provide a value or define a default value.",
        )


def parse_int(value: Any) -> Optional[int]:
    """Parse a base-10 integer, returning ``None`` when ``value`` is not one.

    Accepts ``int`` instances (but not ``bool``) and strings holding an
    optionally signed run of ASCII digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text, 10)
            except ValueError:
                # Past the interpreter's integer string conversion limit.
                return None
    return None


def parse_float(value: Any) -> Optional[float]:
    """Parse a finite number, returning ``None`` when ``value`` is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            parsed = float(value)
        except (OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_PATTERN.fullmatch(text):
            return None
        parsed = float(text)
    else:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed
