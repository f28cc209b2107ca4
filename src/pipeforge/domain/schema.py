"""Schema model for pipeforge.

Type descriptors for typed datasets. A schema type is either a native scalar
type or a custom type that references a nested DataSchema, which makes
schemas structurally recursive:

  Store
    store_name: string
    stock(array): Product
                    name: string
                    pricing: int

Whether a column holds many values is a property of the column, not of the
type: an array column of Product and a single column of Product share the
same CustomType.
"""

from dataclasses import dataclass, field
from enum import Enum


# --- Schema Types ---


class NativeType(Enum):
    """Built-in scalar types."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DATE = "date"
    BOOL = "bool"

    @property
    def type_name(self) -> str:
        return self.value

    @property
    def is_native(self) -> bool:
        return True


@dataclass(frozen=True)
class CustomType:
    """A named type backed by a nested schema.

    The schema may be absent when the type is only used as a label. Decoding
    data into a custom type requires the schema.
    """

    name: str
    schema: "DataSchema | None" = None

    @property
    def type_name(self) -> str:
        return self.name

    @property
    def is_native(self) -> bool:
        return False


SchemaType = NativeType | CustomType


# --- Columns ---


@dataclass(frozen=True)
class SchemaColumnSingle:
    """A column holding a single value."""

    id: str
    type: SchemaType

    @property
    def is_array(self) -> bool:
        return False


@dataclass(frozen=True)
class SchemaColumnArray:
    """A column holding an ordered list of values of ``type``."""

    id: str
    type: SchemaType  # element type

    @property
    def is_array(self) -> bool:
        return True


SchemaColumn = SchemaColumnSingle | SchemaColumnArray


# --- Schema ---


# Compared by identity: schemas may reference themselves through custom types.
@dataclass(eq=False)
class DataSchema:
    """A named, ordered list of typed columns."""

    id: str
    columns: list[SchemaColumn] = field(default_factory=list)

    def get_column(self, column_id: str) -> SchemaColumn | None:
        """Return the column declared with ``column_id``, or None."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def column_ids(self) -> list[str]:
        return [column.id for column in self.columns]

    def as_type(self) -> CustomType:
        """Return the CustomType that labels records of this schema."""
        return CustomType(name=self.id, schema=self)
