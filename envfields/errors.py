"""Errors raised while resolving environment fields."""

from __future__ import annotations

from typing import Any


class EnvFieldError(ValueError):
    """Base class for every accessor failure.

    Subclasses ``ValueError`` so callers that already treat bad configuration
    input as a ``ValueError`` keep working.
    """

    def __init__(self, field_name: Any, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name


class InvalidFieldName(EnvFieldError):
    pass


class MissingValue(EnvFieldError):
    pass


class InvalidDefault(EnvFieldError):
    pass


class InvalidValue(EnvFieldError):
    pass


class DisallowedValue(EnvFieldError):
    def __init__(self, field_name: str, message: str, value: str, allowed_values: list[str]) -> None:
        super().__init__(field_name, message)
        self.value = value
        self.allowed_values = list(allowed_values)


class InvalidDate(EnvFieldError):
    pass


class InvalidDateBoth(InvalidDate):
    pass


class InvalidDateDefault(InvalidDate):
    pass
