"""Validation result models — field errors and the aggregate result."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldError(BaseModel):
    """A single field-level finding.

    ``field`` is a path: ``name`` for top-level fields, ``friends[0].name``
    for fields of complex array elements.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationResult(BaseModel):
    """Outcome of Model.validate — exactly one of entity and errors is present."""

    entity: Optional[dict[str, Any]] = None
    errors: list[FieldError] = Field(default_factory=list)

    @model_validator(mode="after")
    def _entity_xor_errors(self) -> "ValidationResult":
        if (self.entity is None) != bool(self.errors):
            raise ValueError("entity must be None exactly when errors are present")
        return self

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def build(cls, entity: dict[str, Any], errors: list[FieldError]) -> "ValidationResult":
        """Drop the entity when any error was collected."""
        return cls(entity=None if errors else entity, errors=errors)
