"""Delta result types.

A RecordSetDelta holds one RecordDelta per position; each RecordDelta holds
one FieldDelta per column seen in either record. Deltas reference the
compared records and values directly, nothing is copied.
"""

from dataclasses import dataclass, field
from enum import Enum

from pipeforge.domain import DataSchema, Record, RecordSet, Value


class FieldChangeType(Enum):
    """How a single field changed between two records."""

    UNCHANGED = "unchanged"
    ADDED = "added"  # null or absent before, has a value now
    UPDATED = "updated"
    DELETED = "deleted"  # had a value, null or absent now


class RecordChangeType(Enum):
    """How a record changed between two record sets."""

    UNCHANGED = "unchanged"
    ADDED = "added"  # only in the new set
    MODIFIED = "modified"
    DELETED = "deleted"  # only in the old set


@dataclass
class FieldDelta:
    column_id: str
    change_type: FieldChangeType
    old_value: Value | None = None
    new_value: Value | None = None


@dataclass
class RecordDelta:
    """Result of comparing two records at the same position."""

    index: int
    change_type: RecordChangeType
    old_record: Record | None = None
    new_record: Record | None = None
    field_deltas: list[FieldDelta] = field(default_factory=list)

    def has_changes(self) -> bool:
        return self.change_type != RecordChangeType.UNCHANGED

    def changed_fields(self) -> list[str]:
        """Column ids of every field that is not unchanged."""
        return [
            fd.column_id for fd in self.field_deltas if fd.change_type != FieldChangeType.UNCHANGED
        ]

    def added_fields(self) -> list[str]:
        return self._fields_with(FieldChangeType.ADDED)

    def updated_fields(self) -> list[str]:
        return self._fields_with(FieldChangeType.UPDATED)

    def deleted_fields(self) -> list[str]:
        return self._fields_with(FieldChangeType.DELETED)

    def get_field_delta(self, column_id: str) -> FieldDelta | None:
        for fd in self.field_deltas:
            if fd.column_id == column_id:
                return fd
        return None

    def _fields_with(self, change_type: FieldChangeType) -> list[str]:
        return [fd.column_id for fd in self.field_deltas if fd.change_type == change_type]


@dataclass
class DeltaSummary:
    """Count of record deltas per change type."""

    added: int = 0
    modified: int = 0
    deleted: int = 0
    unchanged: int = 0
    total: int = 0


@dataclass
class RecordSetDelta:
    """Result of comparing two record sets position by position."""

    schema: DataSchema | None = None
    record_deltas: list[RecordDelta] = field(default_factory=list)

    def has_changes(self) -> bool:
        return any(rd.has_changes() for rd in self.record_deltas)

    def added_records(self) -> list[RecordDelta]:
        return self._records_with(RecordChangeType.ADDED)

    def modified_records(self) -> list[RecordDelta]:
        return self._records_with(RecordChangeType.MODIFIED)

    def deleted_records(self) -> list[RecordDelta]:
        return self._records_with(RecordChangeType.DELETED)

    def unchanged_records(self) -> list[RecordDelta]:
        return self._records_with(RecordChangeType.UNCHANGED)

    def get(self, index: int) -> RecordDelta | None:
        """Return the delta for original position ``index``, or None."""
        for rd in self.record_deltas:
            if rd.index == index:
                return rd
        return None

    def summary(self) -> DeltaSummary:
        result = DeltaSummary(total=len(self.record_deltas))
        for rd in self.record_deltas:
            if rd.change_type == RecordChangeType.ADDED:
                result.added += 1
            elif rd.change_type == RecordChangeType.MODIFIED:
                result.modified += 1
            elif rd.change_type == RecordChangeType.DELETED:
                result.deleted += 1
            elif rd.change_type == RecordChangeType.UNCHANGED:
                result.unchanged += 1
        return result

    def to_record_set(self) -> RecordSet:
        """Flatten this delta into a RecordSet with the fixed delta schema."""
        from pipeforge.delta.convert import delta_to_record_set

        return delta_to_record_set(self)

    def _records_with(self, change_type: RecordChangeType) -> list[RecordDelta]:
        return [rd for rd in self.record_deltas if rd.change_type == change_type]
