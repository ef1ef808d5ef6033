"""Type — a named set of fields declared on a Model."""

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional, Union

import structlog

from modelme.config import get_settings
from modelme.errors import (
    CoercionError,
    DuplicateFieldError,
    InvalidFieldNameError,
    InvalidFieldOptionsError,
    InvalidTypeNameError,
    UnknownFieldTypeError,
)
from modelme.fields.base import is_number
from modelme.fields.builtin import ArrayFieldType, DatetimeFieldType
from modelme.schema.field import Field
from modelme.schema.options import FieldOptions

if TYPE_CHECKING:
    from modelme.schema.model import Model

logger = structlog.get_logger()


class Type:
    """A schema node. Created through Model.type(), never directly copied."""

    def __init__(self, name: str, model: "Model"):
        if not isinstance(name, str):
            raise InvalidTypeNameError("Type name must be a string")
        if len(name) == 0:
            raise InvalidTypeNameError("Type name must not be empty string")

        self.name = name
        self.model = model
        self._fields: dict[str, Field] = {}

    @property
    def fields(self) -> Mapping[str, Field]:
        return MappingProxyType(self._fields)

    def field(
        self,
        name: str,
        field_type_name: str,
        options: Union[FieldOptions, Mapping[str, Any], None] = None,
    ) -> Field:
        """Declare a field bound to a registered field type.

        Raises:
            UnknownFieldTypeError: field_type_name is not registered on the model.
            DuplicateFieldError: the field is already declared on this type.
            InvalidFieldNameError: name is not a non-empty string.
            InvalidFieldOptionsError: options are malformed or do not fit the field type,
                including min/max bounds the field's values cannot be compared with.
        """
        if not isinstance(name, str) or not name:
            raise InvalidFieldNameError("Field name must be a non-empty string")

        field_type = self.model.get_field_type(field_type_name)
        if field_type is None:
            raise UnknownFieldTypeError(field_type_name)
        if name in self._fields:
            raise DuplicateFieldError(name, self.name)

        new_field = Field(name, field_type, options)
        self._check_element_type(new_field)
        self._check_bounds(new_field)

        self._fields[name] = new_field
        logger.debug("field_declared", type=self.name, field=name, field_type=field_type.name)
        return new_field

    def get_field(self, name: str) -> Optional[Field]:
        return self._fields.get(name)

    def _check_element_type(self, field: Field) -> None:
        element_type = field.element_type
        if element_type is None:
            return
        if not isinstance(field.field_type, ArrayFieldType):
            raise InvalidFieldOptionsError(
                f"Field '{field.name}' declares an element type but is not an array"
            )
        # complex element types may reference types declared later
        if element_type.mode == "simple" and self.model.get_field_type(element_type.type) is None:
            raise InvalidFieldOptionsError(
                f"Field '{field.name}' uses unknown element field type '{element_type.type}'"
            )

    def _check_bounds(self, field: Field) -> None:
        """Normalise min/max so the bound rules can always compare them.

        Datetime fields take datetime bounds (date text is parsed, naive
        values get the default timezone); every other field takes numbers.
        """
        updates = {}
        for key in ("min", "max"):
            bound = getattr(field.options, key)
            if bound is None:
                continue
            if isinstance(field.field_type, DatetimeFieldType):
                updates[key] = self._datetime_bound(field, key, bound)
            elif not is_number(bound):
                raise InvalidFieldOptionsError(
                    f"Field '{field.name}' has a non-numeric {key} bound: {bound!r}"
                )

        if updates:
            field.options = field.options.model_copy(update=updates)

    @staticmethod
    def _datetime_bound(field: Field, key: str, bound) -> datetime:
        if isinstance(bound, str):
            try:
                bound = field.field_type.coerce(bound, field.options)
            except CoercionError as e:
                raise InvalidFieldOptionsError(
                    f"Field '{field.name}' has an invalid {key} bound: {e}"
                ) from e
        if not isinstance(bound, datetime):
            raise InvalidFieldOptionsError(
                f"Field '{field.name}' needs a datetime {key} bound, got {bound!r}"
            )
        if bound.tzinfo is None:
            bound = bound.replace(tzinfo=get_settings().timezone)
        return bound

    def __repr__(self) -> str:
        return f"<Type '{self.name}' fields={list(self._fields)}>"
