"""Schema declarations: Model, Type, Field and field options."""

from modelme.schema.field import Field
from modelme.schema.options import (
    DefaultValue,
    ElementType,
    FieldOptions,
    GeneratedDefault,
    LiteralDefault,
)
from modelme.schema.type import Type
from modelme.schema.model import Model

__all__ = [
    "Field",
    "Model",
    "Type",
    "DefaultValue",
    "ElementType",
    "FieldOptions",
    "GeneratedDefault",
    "LiteralDefault",
]
