"""Field — one named, typed, option-configured slot of a Type."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from modelme.errors import CoercionError
from modelme.fields.base import UNDEFINED, FieldType
from modelme.schema.options import FieldOptions


class Field:
    """Binds a name to a shared FieldType and this field's own options."""

    def __init__(
        self,
        name: str,
        field_type: FieldType,
        options: Union[FieldOptions, Mapping[str, Any], None] = None,
    ):
        self.name = name
        self.field_type = field_type
        self.options = FieldOptions.parse(options)

    def coerce(self, value: Any = UNDEFINED) -> Any:
        """Substitute the default for an absent value, then apply the type's coercion.

        Raises:
            CoercionError: the value cannot be converted (e.g. bad date text).
                ValueError and TypeError from the field type are re-raised as
                CoercionError.
        """
        if value is UNDEFINED and self.options.default_value is not None:
            value = self.options.default_value.resolve()
        if value is UNDEFINED:
            return value
        try:
            return self.field_type.coerce(value, self.options)
        except CoercionError:
            raise
        except (ValueError, TypeError) as e:
            raise CoercionError(str(e)) from e

    def validate(self, value: Any) -> list[str]:
        """Run every rule of the field type; an empty list means valid."""
        errors = []
        for rule in self.field_type.rules:
            message = rule(value, self.options)
            if message:
                errors.append(message)
        return errors

    @property
    def element_type(self):
        return self.options.element_type

    def __repr__(self) -> str:
        return f"<Field '{self.name}': {self.field_type.name}>"
