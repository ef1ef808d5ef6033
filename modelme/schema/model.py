"""Model — root container for field types and declared types.

Usage:
    model = Model()
    person = model.type("Person")
    person.field("name", "string", {"minLength": 1, "maxLength": 20})
    person.field("friends", "array", {"elementType": {"mode": "complex", "type": "Person"}})

    result = model.validate({"name": "Graeme", "friends": []}, "Person")
    if not result.valid:
        # result.errors holds every {field, message} pair
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, Union

import structlog

from modelme.errors import DuplicateTypeError
from modelme.fields.base import FieldType
from modelme.fields.builtin import default_field_types
from modelme.fields.registry import FieldTypeRegistry
from modelme.schema.type import Type
from modelme.validators.engine import ValidationEngine
from modelme.validators.models import ValidationResult

logger = structlog.get_logger()


class Model:
    """A schema definition: field types, types, and the validate entry point.

    Build phase (add_field_type, type, Type.field) is not thread-safe.
    Once built, validate() only reads the schema.
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Nesting limit for complex arrays. Defaults to MODELME_MAX_DEPTH.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be at least 1")

        self.field_types = FieldTypeRegistry(default_field_types())
        self.max_depth = max_depth
        self._types: dict[str, Type] = {}

    # ── Field types ──

    def add_field_type(self, field_type: FieldType) -> None:
        self.field_types.add(field_type)

    def get_field_type(self, name: str) -> Optional[FieldType]:
        return self.field_types.get(name)

    # ── Types ──

    def type(self, name: str) -> Type:
        """Declare a new, empty type."""
        if isinstance(name, str) and name in self._types:
            raise DuplicateTypeError(name)

        new_type = Type(name, self)
        self._types[name] = new_type
        logger.debug("type_declared", type=name)
        return new_type

    def get_type(self, name: str) -> Optional[Type]:
        return self._types.get(name)

    @property
    def types(self) -> Mapping[str, Type]:
        return MappingProxyType(self._types)

    # ── Validation ──

    def validate(self, data: Union[Mapping[str, Any], str, bytes], type_name: str) -> ValidationResult:
        """Coerce and validate data against a declared type.

        Args:
            data: A mapping, or JSON text describing an object
            type_name: Name of a type declared on this model

        Returns:
            ValidationResult with either the coerced entity or every field error

        Raises:
            UnknownTypeError: type_name is not declared
            InvalidInputError: data is not an object nor JSON text for one
        """
        return ValidationEngine(self, max_depth=self.max_depth).validate(data, type_name)
