"""Tagged values produced by validating a document payload against its template."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class TextValue:
    value: str

    @property
    def raw(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NumberValue:
    value: float

    @property
    def raw(self) -> Any:
        # Keep integral numbers as ints in the stored JSON
        if float(self.value).is_integer():
            return int(self.value)
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    @property
    def raw(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ReferenceValue:
    """Identifier of another entity (a client, for client-reference fields)."""

    ref: str

    @property
    def raw(self) -> Any:
        return self.ref


FieldValue = Union[TextValue, NumberValue, BooleanValue, ReferenceValue]
