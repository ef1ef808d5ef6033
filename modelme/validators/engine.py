"""Validation Engine — coerces and validates one input record against a Type.

One engine instance handles one Model.validate call. It walks the field
summary of the root object, coerces and validates every declared field,
and descends into complex array elements with the same algorithm, lifting
nested errors with a ``field[index].nested`` path.

Usage:
    engine = ValidationEngine(model)
    result = engine.validate(data, "Person")
"""

import copy
import json
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

import structlog

from modelme.config import get_settings
from modelme.errors import CoercionError, InvalidInputError, UnknownTypeError
from modelme.fields.base import UNDEFINED
from modelme.schema.field import Field
from modelme.schema.options import ElementType
from modelme.validators.models import FieldError, ValidationResult

if TYPE_CHECKING:
    from modelme.schema.model import Model
    from modelme.schema.type import Type

logger = structlog.get_logger()


class SummaryEntry(NamedTuple):
    """One key of the field summary: the input value and/or the declared field."""

    name: Any
    value: Any
    field: Optional[Field]


def field_summary(obj: Mapping[str, Any], record_type: "Type") -> list[SummaryEntry]:
    """Union of input keys and declared fields, input keys first.

    Values missing from the input are UNDEFINED; keys the type does not
    declare carry no field.
    """
    declared = record_type.fields
    entries = [SummaryEntry(name, value, declared.get(name)) for name, value in obj.items()]
    entries.extend(
        SummaryEntry(name, UNDEFINED, field)
        for name, field in declared.items()
        if name not in obj
    )
    return entries


def _detach(value: Any) -> Any:
    """Copy containers so the entity never shares them with the input."""
    if isinstance(value, (list, dict)):
        return copy.deepcopy(value)
    return value


class ValidationEngine:
    """Validates input records against the types of one Model.

    Design principles:
        - Field-level errors never abort the call; all are collected
        - Schema and input errors (unknown type, non-object root) raise
        - Each complex array element is an independent sub-validation
        - Cyclic data and runaway nesting are reported, not recursed into
    """

    def __init__(self, model: "Model", max_depth: Optional[int] = None):
        self.model = model
        if max_depth is None:
            max_depth = get_settings().MAX_DEPTH
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        # identities of the objects on the current descent path
        self._active: list[int] = []

    def validate(self, data: Any, type_name: str) -> ValidationResult:
        """Validate a root record.

        Args:
            data: Mapping or JSON text describing an object
            type_name: Declared type to validate against

        Returns:
            ValidationResult with the entity or every collected error
        """
        start_time = time.perf_counter()

        record_type = self._resolve_type(type_name)
        obj = self._normalize(data)
        entity, errors = self._validate_object(obj, record_type, prefix="", depth=0)
        result = ValidationResult.build(entity, errors)

        logger.debug(
            "validation_complete",
            type=type_name,
            valid=result.valid,
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    # ── Object level ──

    def _validate_object(
        self,
        obj: Mapping[str, Any],
        record_type: "Type",
        prefix: str,
        depth: int,
    ) -> tuple[dict[str, Any], list[FieldError]]:
        entity: dict[str, Any] = {}
        errors: list[FieldError] = []

        self._active.append(id(obj))
        try:
            for entry in field_summary(obj, record_type):
                if entry.field is None:
                    continue
                path = f"{prefix}{entry.name}"
                value, field_errors = self._validate_field(entry.field, entry.value, path, depth)
                if field_errors:
                    errors.extend(field_errors)
                elif value is not UNDEFINED:
                    entity[entry.name] = value
        finally:
            self._active.pop()

        return entity, errors

    def _validate_field(
        self,
        field: Field,
        raw: Any,
        path: str,
        depth: int,
    ) -> tuple[Any, list[FieldError]]:
        try:
            value = field.coerce(raw)
        except CoercionError as e:
            return UNDEFINED, [FieldError(field=path, message=str(e))]

        errors: list[FieldError] = []
        if field.element_type is not None and isinstance(value, list):
            value, element_errors = self._validate_elements(value, field.element_type, path, depth)
            errors.extend(element_errors)
        else:
            value = _detach(value)

        for message in field.validate(value):
            errors.append(FieldError(field=path, message=message))
        return value, errors

    # ── Array elements ──

    def _validate_elements(
        self,
        items: list[Any],
        element_type: ElementType,
        path: str,
        depth: int,
    ) -> tuple[list[Any], list[FieldError]]:
        if element_type.mode == "complex":
            return self._validate_complex_elements(items, element_type.type, path, depth)
        return self._validate_simple_elements(items, element_type.type, path)

    def _validate_complex_elements(
        self,
        items: list[Any],
        type_name: str,
        path: str,
        depth: int,
    ) -> tuple[list[Any], list[FieldError]]:
        record_type = self._resolve_type(type_name)
        entities: list[Any] = []
        errors: list[FieldError] = []

        for index, element in enumerate(items):
            element_path = f"{path}[{index}]"

            if depth + 1 > self.max_depth:
                logger.warning("max_depth_exceeded", path=element_path, max_depth=self.max_depth)
                errors.append(FieldError(
                    field=element_path,
                    message=f"maximum nesting depth of {self.max_depth} exceeded",
                ))
                continue

            try:
                obj = self._normalize(element)
            except InvalidInputError as e:
                errors.append(FieldError(field=element_path, message=str(e)))
                continue

            if id(obj) in self._active:
                logger.warning("cyclic_reference", path=element_path, type=type_name)
                errors.append(FieldError(field=element_path, message="cyclic reference detected"))
                continue

            entity, element_errors = self._validate_object(
                obj, record_type, prefix=f"{element_path}.", depth=depth + 1
            )
            errors.extend(element_errors)
            entities.append(entity)

        return entities, errors

    def _validate_simple_elements(
        self,
        items: list[Any],
        field_type_name: str,
        path: str,
    ) -> tuple[list[Any], list[FieldError]]:
        element_field = Field(path, self.model.get_field_type(field_type_name))
        values: list[Any] = []
        errors: list[FieldError] = []

        for index, element in enumerate(items):
            element_path = f"{path}[{index}]"
            try:
                value = element_field.coerce(element)
            except CoercionError as e:
                errors.append(FieldError(field=element_path, message=str(e)))
                continue

            for message in element_field.validate(value):
                errors.append(FieldError(field=element_path, message=message))
            values.append(_detach(value))

        return values, errors

    # ── Helpers ──

    def _resolve_type(self, type_name: str) -> "Type":
        record_type = self.model.get_type(type_name)
        if record_type is None:
            raise UnknownTypeError(type_name)
        return record_type

    @staticmethod
    def _normalize(data: Any) -> Mapping[str, Any]:
        """Parse JSON text and reject anything that is not an object."""
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except ValueError as e:
                raise InvalidInputError(f"Cannot parse JSON input: {e}") from e
            if not isinstance(data, dict):
                raise InvalidInputError("JSON input must describe an object")
            return data

        if not isinstance(data, Mapping):
            raise InvalidInputError(
                f"Value must be an object or a JSON string, got {type(data).__name__}"
            )
        return data
