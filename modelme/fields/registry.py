"""Field type registry — name-keyed lookup owned by a single Model."""

from collections.abc import Iterator
from typing import Optional

import structlog

from modelme.errors import DuplicateFieldTypeError
from modelme.fields.base import FieldType

logger = structlog.get_logger()


class FieldTypeRegistry:
    """Maps field-type names to FieldType instances.

    Registration happens during the build phase; lookups afterwards are
    read-only and safe to share between threads.
    """

    def __init__(self, field_types: Optional[list[FieldType]] = None):
        self._field_types: dict[str, FieldType] = {}
        for field_type in field_types or []:
            self.add(field_type)

    def add(self, field_type: FieldType) -> None:
        """Register a field type. Raises DuplicateFieldTypeError on a name clash."""
        if not isinstance(field_type, FieldType):
            raise TypeError(f"Expected a FieldType, got {type(field_type).__name__}")
        if field_type.name in self._field_types:
            raise DuplicateFieldTypeError(field_type.name)

        self._field_types[field_type.name] = field_type
        logger.debug("field_type_registered", field_type=field_type.name)

    def get(self, name: str) -> Optional[FieldType]:
        """Look up a field type; None when it is not registered."""
        return self._field_types.get(name)

    def names(self) -> list[str]:
        return list(self._field_types)

    def __contains__(self, name: object) -> bool:
        return name in self._field_types

    def __iter__(self) -> Iterator[FieldType]:
        return iter(self._field_types.values())

    def __len__(self) -> int:
        return len(self._field_types)
