"""Runtime values stored in records.

Value is a closed union of variants. Every variant reports its SchemaType and
whether it is null:

  StringValue, IntValue, FloatValue, DateValue, BoolValue -> their NativeType
  NullValue    -> the type it was declared with
  ArrayValue   -> its element type (arrays are not a distinct type)
  RecordValue  -> CustomType of the nested record's schema, or None

A null is carried by NullValue rather than by optional scalars, so a null that
goes through storage and back keeps its declared type.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from pipeforge.domain.schema import CustomType, NativeType, SchemaType

if TYPE_CHECKING:
    from pipeforge.domain.record import Record


@dataclass(frozen=True)
class StringValue:
    value: str

    def get_type(self) -> SchemaType:
        return NativeType.STRING

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class IntValue:
    value: int

    def get_type(self) -> SchemaType:
        return NativeType.INT

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class FloatValue:
    value: float

    def get_type(self) -> SchemaType:
        return NativeType.FLOAT

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class DateValue:
    """A point in time. Equality between two DateValues is decided by instant."""

    value: datetime

    def get_type(self) -> SchemaType:
        return NativeType.DATE

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def get_type(self) -> SchemaType:
        return NativeType.BOOL

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class NullValue:
    """A null that remembers the type it stands in for."""

    type: SchemaType | None = None

    def get_type(self) -> SchemaType | None:
        return self.type

    def is_null(self) -> bool:
        return True


@dataclass(frozen=True)
class ArrayValue:
    """An ordered list of values sharing ``element_type``."""

    element_type: SchemaType
    elements: list["Value"] = field(default_factory=list)

    def get_type(self) -> SchemaType:
        return self.element_type

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class RecordValue:
    """A nested record. Null when it holds no record."""

    record: "Record | None" = None

    def get_type(self) -> CustomType | None:
        if self.record is None or self.record.schema is None:
            return None
        return self.record.schema.as_type()

    def is_null(self) -> bool:
        return self.record is None


Value = (
    StringValue
    | IntValue
    | FloatValue
    | DateValue
    | BoolValue
    | NullValue
    | ArrayValue
    | RecordValue
)


# Every variant of Value, for isinstance checks.
VALUE_TYPES = (
    StringValue,
    IntValue,
    FloatValue,
    DateValue,
    BoolValue,
    NullValue,
    ArrayValue,
    RecordValue,
)


def is_null_value(value: "Value | None") -> bool:
    """True for an absent value (None) and for any value reporting null.

    Objects that are not one of the Value variants are never null.
    """
    return value is None or (isinstance(value, VALUE_TYPES) and value.is_null())
