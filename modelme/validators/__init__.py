"""Validation engine — coerces and validates input records against a Type.

Usage:
    from modelme import Model

    result = model.validate(data, "Person")
    if not result.valid:
        for error in result.errors:
            print(error.field, error.message)
"""

from modelme.validators.models import FieldError, ValidationResult
from modelme.validators.engine import ValidationEngine

__all__ = [
    "FieldError",
    "ValidationResult",
    "ValidationEngine",
]
