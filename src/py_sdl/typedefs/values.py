# -*- coding: utf-8 -*-
""" Check and print literal values used as ``@default`` arguments. """

import datetime
import decimal
import math
from typing import Any, Mapping, Sequence

from .._string_utils import is_name, quote
from ..exc import ConfigurationError
from .shapes import BaseType, EnumRef, FieldShape, ScalarKind

_INTS = (ScalarKind.Int, ScalarKind.BigInt)
_NUMBERS = (ScalarKind.Float, ScalarKind.Decimal)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    # GraphQL has no literal for nan or infinity.
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, decimal.Decimal):
        return value.is_finite()
    return _is_int(value)


def _parse_datetime(value: str) -> datetime.datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.datetime.fromisoformat(value)


def _is_iso(parse: Any, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse(value)
    except ValueError:
        return False
    return True


def _is_json(value: Any) -> bool:
    if value is None or isinstance(value, (str, bool)) or _is_number(value):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_json(v) for v in value)
    if isinstance(value, Mapping):
        return all(is_name(k) and _is_json(v) for k, v in value.items())
    return False


def _accepts(base: BaseType, value: Any) -> bool:
    if isinstance(base, EnumRef):
        return isinstance(value, str) and (
            base.values is None or value in base.values
        )
    if base.is_string:
        return isinstance(value, str)
    if base in _INTS:
        return _is_int(value)
    if base in _NUMBERS:
        return _is_number(value)
    if base is ScalarKind.Boolean:
        return isinstance(value, bool)
    if base is ScalarKind.Date:
        return _is_iso(datetime.date.fromisoformat, value) or (
            isinstance(value, datetime.date)
            and not isinstance(value, datetime.datetime)
        )
    if base is ScalarKind.DateTime:
        return isinstance(value, datetime.datetime) or _is_iso(
            _parse_datetime, value
        )
    if base is ScalarKind.Timestamp:
        return _is_int(value) or isinstance(value, (str, datetime.datetime))
    if base is ScalarKind.JSON:
        return _is_json(value)
    return False


def check_default_value(shape: FieldShape, value: Any) -> None:
    """
    Ensure ``value`` is a valid default for a field of the given shape.

    Raises:
        ConfigurationError: when the value does not match the field type
    """
    if value is None:
        raise ConfigurationError("Default value cannot be null")

    if shape.is_object:
        raise ConfigurationError(
            "Reference field %s cannot have a default value" % shape
        )

    if shape.is_list:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ConfigurationError(
                "Expected a list as default for %s, got %r" % (shape, value)
            )
        for item in value:
            if item is None and shape.item_nullable:
                continue
            if not _accepts(shape.base, item):
                raise ConfigurationError(
                    "Invalid list item %r for default of %s" % (item, shape)
                )
    elif not _accepts(shape.base, value):
        raise ConfigurationError(
            "Invalid default value %r for %s" % (value, shape)
        )


def print_value(value: Any, enum: bool = False) -> str:
    """
    Format a Python value as a GraphQL literal.

    Args:
        value: Python value
        enum: Print strings as bare enum values

    >>> print_value([1, 2.5, True, None])
    '[1, 2.5, true, null]'

    >>> print_value({"a": "b"})
    '{a: "b"}'

    >>> print_value("RED", enum=True)
    'RED'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value if enum else quote(value)
    if isinstance(value, (int, float, decimal.Decimal)):
        return str(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return quote(value.isoformat())
    if isinstance(value, Mapping):
        return "{%s}" % ", ".join(
            "%s: %s" % (k, print_value(v, enum)) for k, v in value.items()
        )
    if isinstance(value, (list, tuple)):
        return "[%s]" % ", ".join(print_value(v, enum) for v in value)
    raise TypeError("Cannot print %r as a GraphQL value" % (value,))
