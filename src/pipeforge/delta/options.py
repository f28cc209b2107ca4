"""Comparison options for the delta engine.

Arrays are compared by position unless a key column is configured for the
array's field path. With a key, elements are matched by that column instead:

  CompareOptions().with_array_key("stock", "name")

matches the products of the top-level "stock" array by their "name" column.
Paths of nested columns are dotted: "stores.stock" is the "stock" column of
the records held in the top-level "stores" column.

Options are immutable. Each ``with_array_key`` returns a new value and the
last key set for a path wins.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from pipeforge.errors import InvalidCompareOptionError


@dataclass(frozen=True)
class CompareOptions:
    """Per-path array key configuration."""

    array_keys: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "array_keys", MappingProxyType(dict(self.array_keys)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "CompareOptions":
        """Build options by applying (field_path, key_column) pairs in order."""
        options = cls()
        for field_path, key_column in pairs:
            options = options.with_array_key(field_path, key_column)
        return options

    def with_array_key(self, field_path: str, key_column: str) -> "CompareOptions":
        """Return a copy that matches elements of ``field_path`` by ``key_column``.

        Raises:
            InvalidCompareOptionError: If either argument is empty.
        """
        if not field_path or not key_column:
            raise InvalidCompareOptionError(field_path, key_column)
        return CompareOptions({**self.array_keys, field_path: key_column})

    def get_array_key(self, field_path: str) -> str:
        """Return the key column for ``field_path``, or "" when none is configured."""
        return self.array_keys.get(field_path, "")

    def has_array_key(self, field_path: str) -> bool:
        return self.get_array_key(field_path) != ""


DEFAULT_OPTIONS = CompareOptions()
