"""Typed accessors for environment variables.

Every accessor runs the same pipeline: validate the field name, look up the
raw value, make sure a raw value or a default exists, then coerce and
validate for the target type. Failures raise a subclass of
:class:`envfields.errors.EnvFieldError` whose message names the field and the
offending value(s).

Environment storage is read through ``env`` when given, otherwise through
``os.environ`` at call time, so tests can pass a plain dict.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, Union

from envfields.config.dates import is_valid_date_string
from envfields.config.parsing import (
    EnvSource,
    get_env,
    guard_field_name,
    guard_values_are_present,
    parse_float,
    parse_int,
)
from envfields.config.settings import (
    DEFAULT_BOOLEAN,
    DEFAULT_DATE_FORMAT_MASK,
    DEFAULT_DELIMITER,
    DEFAULT_MIN_VALUE,
)
from envfields.errors import (
    DisallowedValue,
    InvalidDateBoth,
    InvalidDateDefault,
    InvalidDefault,
    InvalidValue,
)
from envfields.models import (
    BooleanFieldRequest,
    DateFieldRequest,
    DecimalFieldRequest,
    FieldRequest,
    IntegerFieldRequest,
    StringFieldRequest,
    StringListFieldRequest,
)

_logger = logging.getLogger(__name__)

FieldValue = Union[str, int, float, bool, List[str]]


def _lookup(field_name: Any, default: Any, env: Optional[EnvSource]) -> tuple[str, Optional[str]]:
    """Run the checks every accessor shares and return ``(name, raw_value)``.

    Validates the field name, reads the raw value, and fails with
    MissingValue when neither a raw value nor a default exists.
    """
    name = guard_field_name(field_name)
    value = get_env(name, env)
    guard_values_are_present(name, value, default)
    if value is None:
        _logger.debug("Environment variable %s is not set; falling back to its default", name)
    else:
        _logger.debug("Environment variable %s read from environment", name)
    return name, value


def resolve_string(request: StringFieldRequest, env: Optional[EnvSource] = None) -> str:
    """Resolve a string field.

    Returns the raw value when set, else the default. A non-empty
    ``allowed_values`` list constrains whichever of the two was picked;
    anything outside it raises DisallowedValue.
    """
    name, value = _lookup(request.field_name, request.default_value, env)
    resolved = value if value is not None else request.default_value

    allowed_values = request.allowed_values or []
    if allowed_values and resolved not in allowed_values:
        raise DisallowedValue(
            name,
            f"Supplied value ({resolved}) is not allowed. Allowed values are [{','.join(allowed_values)}]. "
            f"Check environment variable {name}.",
            value=resolved,
            allowed_values=allowed_values,
        )
    return resolved


def resolve_integer(request: IntegerFieldRequest, env: Optional[EnvSource] = None) -> int:
    """Resolve an integer field bounded below by ``min_value``.

    Without a raw value the default must be an integer >= ``min_value``
    (InvalidDefault otherwise). With one, the raw value must be a base-10
    integer >= ``min_value`` (InvalidValue otherwise).
    """
    name, value = _lookup(request.field_name, request.default_value, env)
    min_value = request.min_value

    if value is None:
        default = parse_int(request.default_value)
        if default is None or default < min_value:
            raise InvalidDefault(
                name,
                f"The defaultValue passed in to environment variable {name} is not a valid integer "
                f"greater than or equal to {min_value}. The defaultValue supplied: ({request.default_value}).",
            )
        return default

    parsed = parse_int(value)
    if parsed is None or parsed < min_value:
        raise InvalidValue(
            name,
            f"The value passed in to environment variable {name} is not a valid integer "
            f"greater than or equal to {min_value}. Value supplied: ({value}).",
        )
    return parsed


def resolve_decimal(request: DecimalFieldRequest, env: Optional[EnvSource] = None) -> float:
    """Resolve a floating point field.

    The default is required and always validated, so a broken default fails
    even when the environment carries a valid value.
    """
    name, value = _lookup(request.field_name, request.default_value, env)
    min_value = request.min_value

    default = parse_float(request.default_value)
    if default is None or default < min_value:
        raise InvalidDefault(
            name,
            f"The default value supplied to environment variable ({name}) is not a valid floating point "
            f"number greater than or equal to {min_value}. Number supplied is ({request.default_value}).",
        )

    if value is None:
        return default

    parsed = parse_float(value)
    if parsed is None or parsed < min_value:
        raise InvalidValue(
            name,
            f"The environment value for ({name}) is not a valid floating point number "
            f"greater than or equal to {min_value}. Value provided is ({value}).",
        )
    return parsed


def resolve_boolean(request: BooleanFieldRequest, env: Optional[EnvSource] = None) -> bool:
    """Resolve a boolean field.

    ``"1"`` is True. Any other non-negative integer, ``"0"`` included, is
    False. Anything that is not a non-negative integer raises InvalidValue.
    """
    name, value = _lookup(request.field_name, request.default_value, env)

    if value is None:
        if not isinstance(request.default_value, bool):
            raise InvalidDefault(
                name,
                f"The defaultValue passed in to environment variable {name} is not a valid boolean. "
                f"The defaultValue supplied: ({request.default_value}).",
            )
        return request.default_value

    as_integer = parse_int(value)
    if as_integer is None or as_integer < 0:
        raise InvalidValue(
            name,
            f"The value passed in to environment variable {name} is not a valid boolean. "
            f"Use 1 for true or 0 for false. Value supplied: ({value}).",
        )
    return as_integer == 1


def resolve_date_string(request: DateFieldRequest, env: Optional[EnvSource] = None) -> str:
    """Resolve a date string matching ``date_format_mask``.

    A valid raw value is returned verbatim, not reformatted. Otherwise a
    valid default is returned. Otherwise InvalidDateBoth is raised when a raw
    value was supplied, InvalidDateDefault when it was not.
    """
    name, value = _lookup(request.field_name, request.default_value, env)
    mask = request.date_format_mask

    if value is not None and is_valid_date_string(value, mask):
        return value
    if is_valid_date_string(request.default_value, mask):
        return request.default_value

    base_message = (
        f"The environment variable {name} does not have a properly configured date string value "
        f"with the format ({mask})."
    )
    if value is not None:
        raise InvalidDateBoth(
            name,
            " ".join(
                [
                    base_message,
                    "This applies to both default value and supplied value.",
                    "Please check the aforementioned field value both in code and in environment variable settings.",
                    f"Supplied value is ({value})",
                    f"Default value is ({request.default_value})",
                ]
            ),
        )
    raise InvalidDateDefault(
        name,
        " ".join(
            [
                base_message,
                "It seems that no valid value was supplied via environment variables "
                "and the default value is also not a valid date.",
                f"The default value is ({request.default_value})",
            ]
        ),
    )


def resolve_string_list(request: StringListFieldRequest, env: Optional[EnvSource] = None) -> List[str]:
    """Resolve a delimited list; segments are trimmed and kept in order."""
    _, value = _lookup(request.field_name, request.default_value, env)
    if value is None:
        return list(request.default_value)
    return [segment.strip() for segment in value.split(request.delimiter)]


_RESOLVERS: Dict[Type[FieldRequest], Callable[..., Any]] = {
    StringFieldRequest: resolve_string,
    IntegerFieldRequest: resolve_integer,
    DecimalFieldRequest: resolve_decimal,
    BooleanFieldRequest: resolve_boolean,
    DateFieldRequest: resolve_date_string,
    StringListFieldRequest: resolve_string_list,
}


def resolve_field(request: FieldRequest, env: Optional[EnvSource] = None) -> FieldValue:
    """Dispatch a parameter object to the accessor for its type."""
    resolver = _RESOLVERS.get(type(request))
    if resolver is None:
        raise TypeError(f"Unsupported field request type: {type(request).__name__}")
    return resolver(request, env)


def get_env_str(
    field_name: str,
    default: Optional[str] = None,
    *,
    allowed_values: Optional[Sequence[str]] = None,
    env: Optional[EnvSource] = None,
) -> str:
    """Read ``field_name`` as a string, see :func:`resolve_string`."""
    request = StringFieldRequest(
        field_name=field_name,
        default_value=default,
        allowed_values=list(allowed_values) if allowed_values is not None else None,
    )
    return resolve_string(request, env)


def get_env_int(
    field_name: str,
    default: Optional[int] = None,
    *,
    min_value: int = DEFAULT_MIN_VALUE,
    env: Optional[EnvSource] = None,
) -> int:
    """Read ``field_name`` as an integer >= ``min_value``, see :func:`resolve_integer`."""
    request = IntegerFieldRequest(field_name=field_name, default_value=default, min_value=min_value)
    return resolve_integer(request, env)


def get_env_float(
    field_name: str,
    default: Any = None,
    *,
    min_value: float = DEFAULT_MIN_VALUE,
    env: Optional[EnvSource] = None,
) -> float:
    """Read ``field_name`` as a float >= ``min_value``, see :func:`resolve_decimal`."""
    request = DecimalFieldRequest(field_name=field_name, default_value=default, min_value=min_value)
    return resolve_decimal(request, env)


def get_env_bool(
    field_name: str,
    default: Any = DEFAULT_BOOLEAN,
    *,
    env: Optional[EnvSource] = None,
) -> bool:
    """Read ``field_name`` as a boolean, see :func:`resolve_boolean`."""
    request = BooleanFieldRequest(field_name=field_name, default_value=default)
    return resolve_boolean(request, env)


def get_env_date_str(
    field_name: str,
    default: Optional[str] = None,
    *,
    date_format_mask: str = DEFAULT_DATE_FORMAT_MASK,
    env: Optional[EnvSource] = None,
) -> str:
    """Read ``field_name`` as a date string, see :func:`resolve_date_string`."""
    request = DateFieldRequest(field_name=field_name, default_value=default, date_format_mask=date_format_mask)
    return resolve_date_string(request, env)


def get_env_str_list(
    field_name: str,
    default: Optional[Sequence[str]] = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    env: Optional[EnvSource] = None,
) -> List[str]:
    """Read ``field_name`` as a list of strings, see :func:`resolve_string_list`."""
    request = StringListFieldRequest(
        field_name=field_name,
        default_value=list(default) if default is not None else None,
        delimiter=delimiter,
    )
    return resolve_string_list(request, env)
