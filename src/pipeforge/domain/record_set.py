"""Ordered collections of records sharing a schema.

Query and transform primitives return new RecordSets and leave the receiver
untouched. Only ``add`` mutates in place. Records themselves are shared
between the receiver and the result, not copied.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from pipeforge.domain.record import Record
from pipeforge.domain.schema import DataSchema


@dataclass(eq=False)
class RecordSet:
    """An order-significant sequence of records. Duplicates are allowed."""

    schema: DataSchema | None
    records: list[Record] = field(default_factory=list)

    def count(self) -> int:
        return len(self.records)

    def is_empty(self) -> bool:
        return not self.records

    def add(self, record: Record) -> None:
        self.records.append(record)

    def get(self, index: int) -> Record | None:
        """Return the record at ``index``, or None when out of bounds.

        Negative indexes are out of bounds; they do not count from the end.
        """
        if index < 0 or index >= len(self.records):
            return None
        return self.records[index]

    def first(self) -> Record | None:
        return self.get(0)

    def last(self) -> Record | None:
        return self.get(len(self.records) - 1)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    # --- Functional primitives ---

    def filter(self, predicate: Callable[[Record], bool]) -> "RecordSet":
        """Return a new set with the records matching ``predicate``."""
        return RecordSet(self.schema, [r for r in self.records if predicate(r)])

    def map(self, transform: Callable[[Record], Record]) -> "RecordSet":
        """Return a new set holding ``transform`` applied to each record."""
        return RecordSet(self.schema, [transform(r) for r in self.records])

    def for_each(self, fn: Callable[[Record], Any]) -> None:
        for record in self.records:
            fn(record)

    def any(self, predicate: Callable[[Record], bool]) -> bool:
        return any(predicate(r) for r in self.records)

    def all(self, predicate: Callable[[Record], bool]) -> bool:
        return all(predicate(r) for r in self.records)

    def take(self, n: int) -> "RecordSet":
        """Return a new set with at most the first ``n`` records."""
        return RecordSet(self.schema, self.records[: max(n, 0)])

    def skip(self, n: int) -> "RecordSet":
        """Return a new set without the first ``n`` records."""
        return RecordSet(self.schema, self.records[max(n, 0) :])

    def reduce(self, initial: Any, reducer: Callable[[Any, Record], Any]) -> Any:
        """Fold the records into a single value.

        ``reducer`` is called once per record, in order, with the running
        accumulator and the record; its result becomes the next accumulator.

        Example:
            total = rs.reduce(0, lambda acc, r: acc + r.get_int("quantity"))
        """
        result = initial
        for record in self.records:
            result = reducer(result, record)
        return result
