"""Built-in field types: string, int, number, datetime, array."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from modelme.config import get_settings
from modelme.errors import CoercionError
from modelme.fields import rules
from modelme.fields.base import FieldType, Rule, is_missing

if TYPE_CHECKING:
    from modelme.schema.options import FieldOptions


class StringFieldType(FieldType):
    """Text. Non-string values are converted with str()."""

    @property
    def name(self) -> str:
        return "string"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (
            rules.max_length_rule,
            rules.min_length_rule,
            rules.null_rule,
            rules.undefined_rule,
            rules.is_string_rule,
        )

    def coerce(self, value: Any, options: "FieldOptions") -> Any:
        if is_missing(value) or isinstance(value, str):
            return value
        return str(value)


class IntFieldType(FieldType):
    @property
    def name(self) -> str:
        return "int"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (
            rules.max_rule,
            rules.min_rule,
            rules.null_rule,
            rules.undefined_rule,
            rules.is_int_rule,
        )


class NumberFieldType(FieldType):
    """Any real number. Not registered on a Model by default."""

    @property
    def name(self) -> str:
        return "number"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (
            rules.max_rule,
            rules.min_rule,
            rules.null_rule,
            rules.undefined_rule,
            rules.is_number_rule,
        )


class DatetimeFieldType(FieldType):
    """Absolute points in time.

    ISO-8601 text is parsed into a timezone-aware datetime; text without an
    offset is read in the configured default timezone (MODELME_DEFAULT_TIMEZONE).
    """

    @property
    def name(self) -> str:
        return "datetime"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (
            rules.max_rule,
            rules.min_rule,
            rules.null_rule,
            rules.undefined_rule,
            rules.is_date_rule,
        )

    def coerce(self, value: Any, options: "FieldOptions") -> Any:
        if not isinstance(value, str):
            return value

        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise CoercionError(f"not a valid date string: '{value}'") from None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=get_settings().timezone)
        return parsed


class ArrayFieldType(FieldType):
    """Ordered sequences. Coercion always yields a new list.

    Element handling (simple field types or complex model types) is driven
    by the field's ``element_type`` option and performed by the engine.
    """

    @property
    def name(self) -> str:
        return "array"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (
            rules.max_length_rule,
            rules.min_length_rule,
            rules.null_rule,
            rules.undefined_rule,
            rules.is_array_rule,
        )

    def coerce(self, value: Any, options: "FieldOptions") -> Any:
        if isinstance(value, (list, tuple)):
            return list(value)
        return value


def default_field_types() -> list[FieldType]:
    """Field types registered on every new Model, in registration order."""
    return [
        StringFieldType(),
        IntFieldType(),
        DatetimeFieldType(),
        ArrayFieldType(),
    ]
