"""Structural diff ("delta") engine for pipeforge datasets.

Compares two versions of a record or record set and reports field- and
record-level changes, with optional key-based matching of array elements.
"""

from pipeforge.delta.types import (
    DeltaSummary,
    FieldChangeType,
    FieldDelta,
    RecordChangeType,
    RecordDelta,
    RecordSetDelta,
)
from pipeforge.delta.options import CompareOptions
from pipeforge.delta.compare import (
    compare_record_sets,
    compare_records,
    records_equal,
    values_equal,
)
from pipeforge.delta.convert import delta_schema, delta_to_record_set
from pipeforge.delta.report import format_delta, format_value

__all__ = [
    # Types
    "DeltaSummary",
    "FieldChangeType",
    "FieldDelta",
    "RecordChangeType",
    "RecordDelta",
    "RecordSetDelta",
    # Options
    "CompareOptions",
    # Compare
    "compare_record_sets",
    "compare_records",
    "records_equal",
    "values_equal",
    # Convert
    "delta_schema",
    "delta_to_record_set",
    # Report
    "format_delta",
    "format_value",
]
