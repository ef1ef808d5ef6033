"""Field types, their rules, and the registry that holds them."""

from modelme.fields.base import UNDEFINED, FieldType, Rule, is_missing, is_number
from modelme.fields.builtin import (
    ArrayFieldType,
    DatetimeFieldType,
    IntFieldType,
    NumberFieldType,
    StringFieldType,
    default_field_types,
)
from modelme.fields.registry import FieldTypeRegistry

__all__ = [
    "UNDEFINED",
    "FieldType",
    "Rule",
    "is_missing",
    "is_number",
    "ArrayFieldType",
    "DatetimeFieldType",
    "IntFieldType",
    "NumberFieldType",
    "StringFieldType",
    "default_field_types",
    "FieldTypeRegistry",
]
