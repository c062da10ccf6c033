"""Exception hierarchy for fitfocus."""

from __future__ import annotations


class FitFocusError(Exception):
    """Base class for all fitfocus errors."""


class DecodeError(FitFocusError):
    """An input unit could not be decoded.

    Raised for the whole unit; no partial result is returned.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class FieldShapeError(FitFocusError):
    """A decoded field value does not have the shape its snapshot slot expects."""

    def __init__(self, field_name: str, value: object, expected: str) -> None:
        super().__init__(
            f"Field {field_name!r} has value {value!r} of type "
            f"{type(value).__name__}, expected {expected}"
        )
        self.field_name = field_name
        self.value = value
        self.expected = expected
