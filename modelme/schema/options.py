"""Field options — parsed once at declaration time.

Options are accepted under camelCase names (``defaultValue``, ``allowNull``,
``elementType`` ...) as well as their snake_case attribute names. Unknown
options are kept as extras so custom field types can read them.
"""

import copy
from collections.abc import Mapping
from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from modelme.errors import InvalidFieldOptionsError


class LiteralDefault:
    """A fixed default. Every use gets its own deep copy."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def resolve(self) -> Any:
        return copy.deepcopy(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LiteralDefault) and other.value == self.value

    def __repr__(self) -> str:
        return f"LiteralDefault({self.value!r})"


class GeneratedDefault:
    """A default produced by calling a zero-argument factory on every use."""

    __slots__ = ("factory",)

    def __init__(self, factory: Callable[[], Any]):
        if not callable(factory):
            raise TypeError("GeneratedDefault requires a callable")
        self.factory = factory

    def resolve(self) -> Any:
        return self.factory()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GeneratedDefault) and other.factory is self.factory

    def __repr__(self) -> str:
        return f"GeneratedDefault({self.factory!r})"


DefaultValue = Union[LiteralDefault, GeneratedDefault]


def as_default_value(raw: Any) -> DefaultValue:
    """Tag a raw ``defaultValue`` option: callables generate, anything else is literal."""
    if isinstance(raw, (LiteralDefault, GeneratedDefault)):
        return raw
    if callable(raw):
        return GeneratedDefault(raw)
    return LiteralDefault(raw)


class ElementType(BaseModel):
    """Element descriptor of an array field.

    ``simple`` names a field type; ``complex`` names a Type of the same Model.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["simple", "complex"]
    type: str = Field(min_length=1)


class FieldOptions(BaseModel):
    """Per-field options shared by every rule of the field's type."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
        arbitrary_types_allowed=True,
    )

    default_value: Optional[DefaultValue] = None
    allow_null: bool = False
    allow_undefined: bool = False
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    min: Any = None
    max: Any = None
    element_type: Optional[ElementType] = None

    @field_validator("default_value", mode="before")
    @classmethod
    def _tag_default(cls, value: Any) -> DefaultValue:
        # an explicit None is a literal default, distinct from "no default"
        return as_default_value(value)

    @classmethod
    def parse(cls, raw: Union["FieldOptions", Mapping[str, Any], None]) -> "FieldOptions":
        """Build options from a mapping, wrapping pydantic errors."""
        if isinstance(raw, FieldOptions):
            return raw
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise InvalidFieldOptionsError(
                f"Field options must be a mapping, got {type(raw).__name__}"
            )
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as e:
            raise InvalidFieldOptionsError(f"Invalid field options: {e}") from e
