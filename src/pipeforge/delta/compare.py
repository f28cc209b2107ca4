"""Delta engine for pipeforge.

Compares two versions of a record or record set and reports what changed.

Record sets are compared by position: the record at index i of the old set is
compared with the record at index i of the new set. A record that moved is
reported as changed at both positions, not as moved.

Records are compared column by column over the union of the columns present
in either record. Absent columns and explicit nulls are treated alike:
  - null -> null    : unchanged
  - null -> value   : added
  - value -> null   : deleted
  - value -> value  : unchanged if structurally equal, else updated

Structural equality:
  - values of different schema types are never equal
  - scalars compare by value, dates by instant
  - nested records compare recursively, column by column
  - arrays compare by position, or by key column when one is configured
    for the array's field path (see CompareOptions)
  - anything else is unequal

The engine never raises for data-shape reasons. Type mismatches, malformed
array elements and unknown value objects all degrade to "changed".
"""

from loguru import logger

from pipeforge.delta.options import DEFAULT_OPTIONS, CompareOptions
from pipeforge.delta.types import (
    FieldChangeType,
    FieldDelta,
    RecordChangeType,
    RecordDelta,
    RecordSetDelta,
)
from pipeforge.domain import (
    VALUE_TYPES,
    ArrayValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    NullValue,
    Record,
    RecordSet,
    RecordValue,
    StringValue,
    Value,
    is_null_value,
)


# --- Record Sets ---


def compare_record_sets(
    old_set: RecordSet | None,
    new_set: RecordSet | None,
    options: CompareOptions | None = None,
) -> RecordSetDelta:
    """Compare two record sets position by position.

    Args:
        old_set: The previous version, or None.
        new_set: The current version, or None.
        options: Array key configuration. Defaults to positional arrays.

    Returns:
        A RecordSetDelta with one RecordDelta per index in
        0..max(len(old_set), len(new_set)) - 1. The delta's schema is the new
        set's schema when it has one, else the old set's.
    """
    options = options or DEFAULT_OPTIONS

    schema = None
    if new_set is not None and new_set.schema is not None:
        schema = new_set.schema
    elif old_set is not None and old_set.schema is not None:
        schema = old_set.schema

    old_records = old_set.records if old_set is not None else []
    new_records = new_set.records if new_set is not None else []

    delta = RecordSetDelta(schema=schema)
    for index in range(max(len(old_records), len(new_records))):
        old_record = old_records[index] if index < len(old_records) else None
        new_record = new_records[index] if index < len(new_records) else None
        delta.record_deltas.append(compare_records(old_record, new_record, index, options))

    logger.debug(
        f"Compared record sets: old={len(old_records)} new={len(new_records)} "
        f"summary={delta.summary()}"
    )
    return delta


# --- Records ---


def compare_records(
    old_record: Record | None,
    new_record: Record | None,
    index: int = 0,
    options: CompareOptions | None = None,
) -> RecordDelta:
    """Compare two records and return a RecordDelta.

    Args:
        old_record: The previous version, or None.
        new_record: The current version, or None.
        index: Position of the records within their record sets.
        options: Array key configuration. Defaults to positional arrays.

    Returns:
        A RecordDelta. Field deltas are only computed when both records exist.
    """
    options = options or DEFAULT_OPTIONS

    if old_record is None and new_record is None:
        return RecordDelta(index=index, change_type=RecordChangeType.UNCHANGED)

    if old_record is None:
        return RecordDelta(index=index, change_type=RecordChangeType.ADDED, new_record=new_record)

    if new_record is None:
        return RecordDelta(index=index, change_type=RecordChangeType.DELETED, old_record=old_record)

    field_deltas = _compare_fields(old_record, new_record, "", options)
    changed = any(fd.change_type != FieldChangeType.UNCHANGED for fd in field_deltas)

    return RecordDelta(
        index=index,
        change_type=RecordChangeType.MODIFIED if changed else RecordChangeType.UNCHANGED,
        old_record=old_record,
        new_record=new_record,
        field_deltas=field_deltas,
    )


def records_equal(
    a: Record | None,
    b: Record | None,
    options: CompareOptions | None = None,
) -> bool:
    """Return True if two records hold structurally equal values.

    Two missing records are equal; a missing record never equals a present one.
    """
    return _records_equal(a, b, "", options or DEFAULT_OPTIONS)


def values_equal(
    a: Value | None,
    b: Value | None,
    options: CompareOptions | None = None,
    field_path: str = "",
) -> bool:
    """Return True if two values are structurally equal.

    ``field_path`` is the dotted path of the column holding the values; it
    selects the array key configured in ``options``.
    """
    return _values_equal(a, b, field_path, options or DEFAULT_OPTIONS)


def _compare_fields(
    old_record: Record,
    new_record: Record,
    parent_path: str,
    options: CompareOptions,
) -> list[FieldDelta]:
    """One FieldDelta per column present in either record.

    Columns follow the old record's order, then columns found only in the new one.
    """
    column_ids = list(old_record.values)
    column_ids.extend(c for c in new_record.values if c not in old_record.values)

    return [
        _compare_field_values(
            column_id,
            old_record.values.get(column_id),
            new_record.values.get(column_id),
            _child_path(parent_path, column_id),
            options,
        )
        for column_id in column_ids
    ]


def _compare_field_values(
    column_id: str,
    old_value: Value | None,
    new_value: Value | None,
    field_path: str,
    options: CompareOptions,
) -> FieldDelta:
    old_is_null = is_null_value(old_value)
    new_is_null = is_null_value(new_value)

    if old_is_null and new_is_null:
        change_type = FieldChangeType.UNCHANGED
    elif old_is_null:
        change_type = FieldChangeType.ADDED
    elif new_is_null:
        change_type = FieldChangeType.DELETED
    elif _values_equal(old_value, new_value, field_path, options):
        change_type = FieldChangeType.UNCHANGED
    else:
        change_type = FieldChangeType.UPDATED

    return FieldDelta(
        column_id=column_id,
        change_type=change_type,
        old_value=old_value,
        new_value=new_value,
    )


# --- Structural Equality ---


def _records_equal(
    a: Record | None,
    b: Record | None,
    parent_path: str,
    options: CompareOptions,
) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False

    # Column ids are dict keys, so equal sizes plus every left key on the
    # right means both records hold the same columns.
    if len(a.values) != len(b.values):
        return False

    for column_id, value_a in a.values.items():
        if column_id not in b.values:
            return False
        field_path = _child_path(parent_path, column_id)
        if not _values_equal(value_a, b.values[column_id], field_path, options):
            return False

    return True


def _values_equal(
    a: Value | None,
    b: Value | None,
    field_path: str,
    options: CompareOptions,
) -> bool:
    a_is_null = is_null_value(a)
    b_is_null = is_null_value(b)
    if a_is_null or b_is_null:
        return a_is_null and b_is_null

    if not isinstance(a, VALUE_TYPES) or not isinstance(b, VALUE_TYPES):
        logger.trace(f"Unknown value at {field_path!r}: {type(a).__name__}, {type(b).__name__}")
        return False

    if a.get_type() != b.get_type():
        return False

    if isinstance(a, StringValue):
        return isinstance(b, StringValue) and a.value == b.value

    elif isinstance(a, IntValue):
        return isinstance(b, IntValue) and a.value == b.value

    elif isinstance(a, FloatValue):
        return isinstance(b, FloatValue) and a.value == b.value

    elif isinstance(a, BoolValue):
        return isinstance(b, BoolValue) and a.value == b.value

    elif isinstance(a, DateValue):
        return isinstance(b, DateValue) and a.value == b.value

    elif isinstance(a, ArrayValue):
        return isinstance(b, ArrayValue) and _arrays_equal(a, b, field_path, options)

    elif isinstance(a, RecordValue):
        if not isinstance(b, RecordValue):
            return False
        return _records_equal(a.record, b.record, field_path, options)

    elif isinstance(a, NullValue):
        # Nulls are handled above.
        return False

    # New Value variants must be handled above; until then they never compare equal.
    return False


# --- Arrays ---


def _arrays_equal(
    a: ArrayValue,
    b: ArrayValue,
    field_path: str,
    options: CompareOptions,
) -> bool:
    """Compare arrays by position, or by key column if one is configured.

    Elements inherit the array's field path.
    """
    key_column = options.get_array_key(field_path)

    if not key_column:
        if len(a.elements) != len(b.elements):
            return False
        return all(
            _values_equal(elem_a, elem_b, field_path, options)
            for elem_a, elem_b in zip(a.elements, b.elements)
        )

    return _arrays_equal_by_key(a, b, key_column, field_path, options)


def _arrays_equal_by_key(
    a: ArrayValue,
    b: ArrayValue,
    key_column: str,
    field_path: str,
    options: CompareOptions,
) -> bool:
    """Match elements by ``key_column`` and compare each matched pair.

    Order does not matter. Elements that are not records or lack a key are
    ignored on both sides.
    """
    a_map = _build_array_key_map(a.elements, key_column, field_path)
    b_map = _build_array_key_map(b.elements, key_column, field_path)

    if len(a_map) != len(b_map):
        return False

    for key, elem_a in a_map.items():
        elem_b = b_map.get(key)
        if elem_b is None:
            return False
        if not _values_equal(elem_a, elem_b, field_path, options):
            return False

    return True


def _build_array_key_map(
    elements: list[Value],
    key_column: str,
    field_path: str,
) -> dict[str, Value]:
    """Map key -> element for every record element with a non-null key.

    Later elements with the same key replace earlier ones.
    """
    result: dict[str, Value] = {}
    for element in elements:
        if not isinstance(element, RecordValue) or element.record is None:
            logger.trace(f"Skipping non-record element in {field_path!r}")
            continue

        key_value = element.record.get(key_column)
        if is_null_value(key_value):
            logger.trace(f"Skipping element without {key_column!r} in {field_path!r}")
            continue

        result[_key_to_string(key_value, field_path)] = element
    return result


def _key_to_string(value: Value, field_path: str) -> str:
    """Stringify an array key.

    Strings are used verbatim and ints as decimal text. Every other type
    collapses to "", so such keys all collide with one another.
    """
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, IntValue):
        return str(value.value)

    logger.trace(f"Key of type {type(value).__name__} in {field_path!r} stringifies to ''")
    return ""


def _child_path(parent_path: str, column_id: str) -> str:
    return f"{parent_path}.{column_id}" if parent_path else column_id
