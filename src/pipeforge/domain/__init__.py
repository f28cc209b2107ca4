"""Typed value and record model for pipeforge datasets."""

from pipeforge.domain.schema import (
    CustomType,
    DataSchema,
    NativeType,
    SchemaColumn,
    SchemaColumnArray,
    SchemaColumnSingle,
    SchemaType,
)
from pipeforge.domain.value import (
    ArrayValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    NullValue,
    RecordValue,
    StringValue,
    VALUE_TYPES,
    Value,
    is_null_value,
)
from pipeforge.domain.record import ZERO_DATE, Record
from pipeforge.domain.record_set import RecordSet

__all__ = [
    # Schema
    "CustomType",
    "DataSchema",
    "NativeType",
    "SchemaColumn",
    "SchemaColumnArray",
    "SchemaColumnSingle",
    "SchemaType",
    # Values
    "ArrayValue",
    "BoolValue",
    "DateValue",
    "FloatValue",
    "IntValue",
    "NullValue",
    "RecordValue",
    "StringValue",
    "VALUE_TYPES",
    "Value",
    "is_null_value",
    # Records
    "ZERO_DATE",
    "Record",
    "RecordSet",
]
