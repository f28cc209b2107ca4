"""Typed records.

A Record binds a column-id -> Value mapping to a schema. The schema is a
reference only: records are never validated against it, and may hold columns
the schema does not declare or lack columns it does.

Typed accessors are lenient. When the stored value is absent, null, or of
another variant, they return the zero value of the requested type instead of
raising.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pipeforge.domain.schema import DataSchema
from pipeforge.domain.value import (
    ArrayValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    RecordValue,
    StringValue,
    Value,
)

# Zero value returned by Record.get_date.
ZERO_DATE = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(eq=False)
class Record:
    """One instance of typed data."""

    schema: DataSchema | None
    values: dict[str, Value] = field(default_factory=dict)

    def get(self, column_id: str) -> Value | None:
        return self.values.get(column_id)

    def set(self, column_id: str, value: Value) -> None:
        self.values[column_id] = value

    def column_ids(self) -> list[str]:
        return list(self.values)

    def __len__(self) -> int:
        return len(self.values)

    # --- Typed accessors ---

    def get_string(self, column_id: str) -> str:
        """Return the string stored at ``column_id``, or "" otherwise."""
        value = self.values.get(column_id)
        return value.value if isinstance(value, StringValue) else ""

    def get_int(self, column_id: str) -> int:
        """Return the int stored at ``column_id``, or 0 otherwise."""
        value = self.values.get(column_id)
        return value.value if isinstance(value, IntValue) else 0

    def get_float(self, column_id: str) -> float:
        """Return the float stored at ``column_id``, or 0.0 otherwise."""
        value = self.values.get(column_id)
        return value.value if isinstance(value, FloatValue) else 0.0

    def get_date(self, column_id: str) -> datetime:
        """Return the date stored at ``column_id``, or ZERO_DATE otherwise."""
        value = self.values.get(column_id)
        return value.value if isinstance(value, DateValue) else ZERO_DATE

    def get_bool(self, column_id: str) -> bool:
        """Return the bool stored at ``column_id``, or False otherwise."""
        value = self.values.get(column_id)
        return value.value if isinstance(value, BoolValue) else False

    def get_array(self, column_id: str) -> list[Value]:
        """Return the elements stored at ``column_id``, or [] otherwise."""
        value = self.values.get(column_id)
        return value.elements if isinstance(value, ArrayValue) else []

    def get_record(self, column_id: str) -> "Record | None":
        """Return the nested record stored at ``column_id``, or None otherwise."""
        value = self.values.get(column_id)
        return value.record if isinstance(value, RecordValue) else None
