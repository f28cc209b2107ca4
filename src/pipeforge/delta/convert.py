"""Convert a RecordSetDelta into an ordinary RecordSet.

Each RecordDelta becomes one record of the fixed "Delta" schema:

  index:        int
  change_type:  string   ("unchanged" | "added" | "modified" | "deleted")
  old:          <compared schema>, or string when the delta has no schema
  new:          <compared schema>, or string when the delta has no schema

The old/new columns hold the compared records as RecordValues. A missing
record is stored as RecordValue(None), which reports as null.
"""

from pipeforge.delta.types import RecordSetDelta
from pipeforge.domain import (
    DataSchema,
    IntValue,
    NativeType,
    Record,
    RecordSet,
    RecordValue,
    SchemaColumnSingle,
    SchemaType,
    StringValue,
)

DELTA_SCHEMA_ID = "Delta"


def delta_schema(schema: DataSchema | None) -> DataSchema:
    """Build the delta schema for records of ``schema``."""
    ref_type: SchemaType = schema.as_type() if schema is not None else NativeType.STRING

    return DataSchema(
        id=DELTA_SCHEMA_ID,
        columns=[
            SchemaColumnSingle(id="index", type=NativeType.INT),
            SchemaColumnSingle(id="change_type", type=NativeType.STRING),
            SchemaColumnSingle(id="old", type=ref_type),
            SchemaColumnSingle(id="new", type=ref_type),
        ],
    )


def delta_to_record_set(delta: RecordSetDelta) -> RecordSet:
    """Flatten ``delta`` into a RecordSet, one record per RecordDelta, in order."""
    schema = delta_schema(delta.schema)
    result = RecordSet(schema)

    for rd in delta.record_deltas:
        record = Record(schema)
        record.set("index", IntValue(rd.index))
        record.set("change_type", StringValue(rd.change_type.value))
        record.set("old", RecordValue(rd.old_record))
        record.set("new", RecordValue(rd.new_record))
        result.add(record)

    return result
