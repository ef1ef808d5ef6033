"""Built-in validation rules.

Each rule is a pure function ``(value, options) -> message | None``.
Bound and format rules ignore None and UNDEFINED: nullability and presence
are enforced only by null_rule and undefined_rule.
"""

from collections.abc import Sized
from datetime import datetime
from typing import Any, Optional

from modelme.config import get_settings
from modelme.fields.base import UNDEFINED, is_missing, is_number


def _bounded(value: Any, bound: Any) -> Optional[tuple[Any, Any]]:
    """The pair to compare, or None when value and bound are different kinds."""
    if is_number(value) and is_number(bound):
        return value, bound
    if isinstance(value, datetime) and isinstance(bound, datetime):
        # naive values are read in the default timezone, like naive date text
        if value.tzinfo is None and bound.tzinfo is not None:
            value = value.replace(tzinfo=get_settings().timezone)
        elif bound.tzinfo is None and value.tzinfo is not None:
            bound = bound.replace(tzinfo=get_settings().timezone)
        return value, bound
    return None


def max_length_rule(value: Any, options) -> Optional[str]:
    if is_missing(value) or options.max_length is None or not isinstance(value, Sized):
        return None
    if len(value) > options.max_length:
        return f"must not be greater than {options.max_length} characters"
    return None


def min_length_rule(value: Any, options) -> Optional[str]:
    if is_missing(value) or options.min_length is None or not isinstance(value, Sized):
        return None
    if len(value) < options.min_length:
        return f"must be at least {options.min_length} characters"
    return None


def null_rule(value: Any, options) -> Optional[str]:
    if value is None and not options.allow_null:
        return "must not be null"
    return None


def undefined_rule(value: Any, options) -> Optional[str]:
    if value is UNDEFINED and not options.allow_undefined:
        return "must be defined"
    return None


def min_rule(value: Any, options) -> Optional[str]:
    if is_missing(value) or options.min is None:
        return None
    pair = _bounded(value, options.min)
    if pair is not None and pair[0] < pair[1]:
        return f"value must be at least {options.min}"
    return None


def max_rule(value: Any, options) -> Optional[str]:
    if is_missing(value) or options.max is None:
        return None
    pair = _bounded(value, options.max)
    if pair is not None and pair[0] > pair[1]:
        return f"value must not be greater than {options.max}"
    return None


def is_string_rule(value: Any, options) -> Optional[str]:
    if is_missing(value):
        return None
    if not isinstance(value, str):
        return "value must be a string"
    return None


def is_int_rule(value: Any, options) -> Optional[str]:
    if is_missing(value):
        return None
    if not is_number(value):
        return "value must be a number"
    if isinstance(value, float) and not value.is_integer():
        return f"the number {value} is not an integer"
    return None


def is_number_rule(value: Any, options) -> Optional[str]:
    if is_missing(value):
        return None
    if not is_number(value):
        return "value must be a number"
    return None


def is_array_rule(value: Any, options) -> Optional[str]:
    if is_missing(value):
        return None
    if not isinstance(value, list):
        return "value is not an array"
    return None


def is_date_rule(value: Any, options) -> Optional[str]:
    if is_missing(value):
        return None
    if not isinstance(value, datetime):
        return "value is not a date"
    return None
