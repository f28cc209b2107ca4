"""
Custom exceptions for pipeforge.

Comparison and conversion never raise for data-shape reasons. These errors
are limited to building configuration from caller-supplied input.
"""


class PipeforgeError(Exception):
    """Base exception for all pipeforge errors."""

    pass


class InvalidCompareOptionError(PipeforgeError, ValueError):
    """Raised when an array key option has an empty field path or key column."""

    def __init__(self, field_path: str, key_column: str):
        self.field_path = field_path
        self.key_column = key_column
        super().__init__(
            f"Invalid array key option: field path {field_path!r}, key column {key_column!r}"
        )
