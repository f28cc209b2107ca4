"""Tests for pipeforge.delta.report."""

from datetime import datetime, timezone

from pipeforge.delta import CompareOptions, compare_record_sets, format_delta, format_value
from pipeforge.domain import (
    ArrayValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    NativeType,
    NullValue,
    RecordSet,
    RecordValue,
    StringValue,
)


class TestFormatValue:
    def test_scalars(self):
        assert format_value(StringValue("a")) == '"a"'
        assert format_value(IntValue(3)) == "3"
        assert format_value(FloatValue(2.5)) == "2.5"
        assert format_value(BoolValue(False)) == "false"
        assert (
            format_value(DateValue(datetime(2024, 1, 2, tzinfo=timezone.utc)))
            == "2024-01-02T00:00:00+00:00"
        )

    def test_nulls(self):
        assert format_value(None) == "null"
        assert format_value(NullValue(NativeType.INT)) == "null"
        assert format_value(RecordValue(None)) == "null"

    def test_array_and_record(self, make_product):
        array = ArrayValue(NativeType.INT, [IntValue(1), IntValue(2)])
        assert format_value(array) == "[1, 2]"
        assert format_value(make_product("Laptop", 999)) == '{name: "Laptop", pricing: 999}'


class TestFormatDelta:
    def test_summary_and_changed_records(self, make_store, store_schema):
        old = RecordSet(store_schema, [make_store("North", [("A", 1)]), make_store("South", [])])
        new = RecordSet(store_schema, [make_store("North", [("A", 2)])])

        text = format_delta(compare_record_sets(old, new), label_column="store_name")
        lines = text.splitlines()

        assert lines[0] == "Summary: added=0 modified=1 deleted=1 unchanged=0 total=2"
        assert lines[1] == "[0] North: modified"
        assert lines[2].startswith("  ~ stock: ")
        assert lines[3] == "[1] South: deleted"
        assert len(lines) == 4

    def test_unchanged_records_hidden_by_default(self, make_store, store_schema):
        rs = RecordSet(store_schema, [make_store("North", [("A", 1)])])
        delta = compare_record_sets(rs, rs)

        assert format_delta(delta).splitlines() == [
            "Summary: added=0 modified=0 deleted=0 unchanged=1 total=1"
        ]
        assert format_delta(delta, include_unchanged=True).splitlines()[1] == "[0]: unchanged"

    def test_added_and_deleted_fields(self, item_schema, make_item):
        old_item = make_item(1, "a")
        new_item = make_item(1, "a")
        del new_item.values["label"]
        new_item.set("note", StringValue("x"))

        delta = compare_record_sets(
            RecordSet(item_schema, [old_item]), RecordSet(item_schema, [new_item])
        )
        lines = format_delta(delta).splitlines()

        assert '  - label: "a"' in lines
        assert '  + note: "x"' in lines

    def test_long_values_are_truncated(self, item_schema, make_item):
        old = make_item(1, "a" * 100)
        new = make_item(1, "b" * 100)
        delta = compare_record_sets(RecordSet(item_schema, [old]), RecordSet(item_schema, [new]))

        line = format_delta(delta, value_width=10).splitlines()[2]
        assert line == '  ~ label: "aaaaaa... -> "bbbbbb...'

    def test_keyed_comparison_report(self, make_store, store_schema):
        old = RecordSet(store_schema, [make_store("North", [("A", 1), ("B", 2)])])
        new = RecordSet(store_schema, [make_store("North", [("B", 2), ("A", 1)])])
        options = CompareOptions().with_array_key("stock", "name")

        assert "modified=0" in format_delta(compare_record_sets(old, new, options))
