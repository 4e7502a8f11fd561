"""Parameter objects for the typed accessors."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from envfields.config.settings import (
    DEFAULT_BOOLEAN,
    DEFAULT_DATE_FORMAT_MASK,
    DEFAULT_DELIMITER,
    DEFAULT_MIN_VALUE,
)


class FieldRequest(BaseModel):
    # field_name and default_value stay loose; the accessors report bad ones
    # as InvalidFieldName / InvalidDefault instead of a ValidationError.
    model_config = ConfigDict(frozen=True)

    field_name: Any = None
    default_value: Any = None


class StringFieldRequest(FieldRequest):
    default_value: Optional[str] = None
    allowed_values: Optional[List[str]] = None


class IntegerFieldRequest(FieldRequest):
    min_value: int = DEFAULT_MIN_VALUE


class DecimalFieldRequest(FieldRequest):
    min_value: float = DEFAULT_MIN_VALUE


class BooleanFieldRequest(FieldRequest):
    default_value: Any = DEFAULT_BOOLEAN


class DateFieldRequest(FieldRequest):
    date_format_mask: str = Field(default=DEFAULT_DATE_FORMAT_MASK, min_length=1)


class StringListFieldRequest(FieldRequest):
    default_value: Optional[List[str]] = None
    delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1)
