"""Plain-text rendering of record set deltas."""

from __future__ import annotations

from pipeforge.delta.types import FieldChangeType, FieldDelta, RecordDelta, RecordSetDelta
from pipeforge.domain import (
    ArrayValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    NullValue,
    RecordValue,
    StringValue,
    Value,
)

NULL_MARKER = "null"


def _truncate(text: str, width: int) -> str:
    if width <= 0 or len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def format_value(value: Value | None) -> str:
    """Render a value the way it would read in a JSON document."""
    if value is None or isinstance(value, NullValue):
        return NULL_MARKER
    if isinstance(value, StringValue):
        return f'"{value.value}"'
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, (IntValue, FloatValue)):
        return str(value.value)
    if isinstance(value, DateValue):
        return value.value.isoformat()
    if isinstance(value, ArrayValue):
        return "[" + ", ".join(format_value(e) for e in value.elements) + "]"
    if isinstance(value, RecordValue):
        if value.record is None:
            return NULL_MARKER
        fields = ", ".join(f"{k}: {format_value(v)}" for k, v in value.record.values.items())
        return "{" + fields + "}"
    return f"<{type(value).__name__}>"


def _record_label(rd: RecordDelta, label_column: str | None) -> str:
    if not label_column:
        return ""
    record = rd.old_record if rd.old_record is not None else rd.new_record
    label = record.get_string(label_column) if record is not None else ""
    return f" {label}" if label else ""


def _format_field(fd: FieldDelta, width: int) -> str:
    old = _truncate(format_value(fd.old_value), width)
    new = _truncate(format_value(fd.new_value), width)
    if fd.change_type == FieldChangeType.ADDED:
        return f"  + {fd.column_id}: {new}"
    if fd.change_type == FieldChangeType.DELETED:
        return f"  - {fd.column_id}: {old}"
    return f"  ~ {fd.column_id}: {old} -> {new}"


def format_delta(
    delta: RecordSetDelta,
    label_column: str | None = None,
    include_unchanged: bool = False,
    value_width: int = 60,
) -> str:
    """Render ``delta`` as text: a summary line, then one block per record.

    Args:
        delta: The delta to render.
        label_column: String column shown next to each record index.
        include_unchanged: Also list unchanged records.
        value_width: Values longer than this are truncated.
    """
    summary = delta.summary()
    lines = [
        f"Summary: added={summary.added} modified={summary.modified} "
        f"deleted={summary.deleted} unchanged={summary.unchanged} total={summary.total}"
    ]

    for rd in delta.record_deltas:
        if not rd.has_changes() and not include_unchanged:
            continue
        lines.append(f"[{rd.index}]{_record_label(rd, label_column)}: {rd.change_type.value}")
        for fd in rd.field_deltas:
            if fd.change_type != FieldChangeType.UNCHANGED:
                lines.append(_format_field(fd, value_width))

    return "\n".join(lines)
