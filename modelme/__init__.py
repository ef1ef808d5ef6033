"""modelme — schema definition and validation/coercion engine.

Usage:
    from modelme import Model

    model = Model()
    person = model.type("Person")
    person.field("name", "string", {"minLength": 1, "maxLength": 20})
    person.field("age", "int", {"min": 0, "max": 200})

    result = model.validate({"name": "Graeme", "age": 27}, "Person")
"""

from modelme.config import Settings, get_settings
from modelme.errors import (
    CoercionError,
    DuplicateFieldError,
    DuplicateFieldTypeError,
    DuplicateTypeError,
    InvalidFieldNameError,
    InvalidFieldOptionsError,
    InvalidInputError,
    InvalidTypeNameError,
    ModelMeError,
    UnknownFieldTypeError,
    UnknownTypeError,
)
from modelme.fields import (
    UNDEFINED,
    ArrayFieldType,
    DatetimeFieldType,
    FieldType,
    FieldTypeRegistry,
    IntFieldType,
    NumberFieldType,
    StringFieldType,
)
from modelme.schema import (
    ElementType,
    Field,
    FieldOptions,
    GeneratedDefault,
    LiteralDefault,
    Model,
    Type,
)
from modelme.validators import FieldError, ValidationEngine, ValidationResult
from modelme.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "CoercionError",
    "DuplicateFieldError",
    "DuplicateFieldTypeError",
    "DuplicateTypeError",
    "InvalidFieldNameError",
    "InvalidFieldOptionsError",
    "InvalidInputError",
    "InvalidTypeNameError",
    "ModelMeError",
    "UnknownFieldTypeError",
    "UnknownTypeError",
    "UNDEFINED",
    "ArrayFieldType",
    "DatetimeFieldType",
    "FieldType",
    "FieldTypeRegistry",
    "IntFieldType",
    "NumberFieldType",
    "StringFieldType",
    "ElementType",
    "Field",
    "FieldOptions",
    "GeneratedDefault",
    "LiteralDefault",
    "Model",
    "Type",
    "FieldError",
    "ValidationEngine",
    "ValidationResult",
]
