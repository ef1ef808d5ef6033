"""Field type contract — abstract base every field type implements.

A field type is a named bundle of an ordered list of rules plus a coercion
step. Field types are created once and shared read-only by every Field
that uses them; they hold no per-field state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from modelme.schema.options import FieldOptions


class _Undefined:
    """Marker for a key that is absent from the input (as opposed to None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

Rule = Callable[[Any, "FieldOptions"], Optional[str]]


def is_missing(value: Any) -> bool:
    """True for None and UNDEFINED — the values format rules ignore."""
    return value is None or value is UNDEFINED


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FieldType(ABC):
    """Abstract base for all field types.

    Contract:
        - rules run in order and are never short-circuited
        - rules and coerce never mutate their arguments
        - coerce raises CoercionError for values it cannot convert
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, unique within a Model."""
        ...

    @property
    @abstractmethod
    def rules(self) -> tuple[Rule, ...]:
        """Ordered validation rules."""
        ...

    def coerce(self, value: Any, options: "FieldOptions") -> Any:
        """Convert acceptable values to the canonical form. Pass-through by default."""
        return value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.name}'>"
