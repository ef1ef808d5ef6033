"""Exception hierarchy for modelme.

Definition-time and input-shape errors are raised immediately.
CoercionError is the only exception the validation engine catches: it is
turned into a field-level error instead of aborting the call.
"""


class ModelMeError(ValueError):
    """Base class for every exception raised by modelme."""


# ── Definition-time errors ──


class DuplicateFieldTypeError(ModelMeError):
    def __init__(self, name: str):
        super().__init__(f"The field type '{name}' already exists")
        self.name = name


class DuplicateTypeError(ModelMeError):
    def __init__(self, name: str):
        super().__init__(f"A type with name '{name}' already exists")
        self.name = name


class DuplicateFieldError(ModelMeError):
    def __init__(self, field_name: str, type_name: str):
        super().__init__(f"The field '{field_name}' already exists on type '{type_name}'")
        self.field_name = field_name
        self.type_name = type_name


class UnknownFieldTypeError(ModelMeError):
    def __init__(self, name: str):
        super().__init__(f"The field type '{name}' is not valid")
        self.name = name


class InvalidTypeNameError(ModelMeError):
    """Type names must be non-empty strings."""


class InvalidFieldNameError(ModelMeError):
    """Field names must be non-empty strings."""


class InvalidFieldOptionsError(ModelMeError):
    """Field options could not be parsed or do not fit the field type."""


# ── Input-shape errors ──


class UnknownTypeError(ModelMeError):
    def __init__(self, name: str):
        super().__init__(f"The type '{name}' does not exist")
        self.name = name


class InvalidInputError(ModelMeError):
    """Root input is neither a mapping nor JSON text describing an object."""


# ── Field-level errors ──


class CoercionError(ModelMeError):
    """Raised by FieldType.coerce when a value cannot be converted."""
