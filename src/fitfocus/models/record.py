"""Decoded FIT records as handed over by the decoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

Scalar = int | float | str | datetime


@dataclass(frozen=True)
class FieldValue:
    """A single decoded field value with its unit label."""

    value: Scalar | list[Scalar]
    units: str = ""


@dataclass(frozen=True)
class GenericRecord:
    """One decoded FIT data message.

    ``kind`` is the PascalCase message label (``"Record"``, ``"Lap"``,
    ``"Session"``, ...).  Field names are unique within a record.
    """

    kind: str
    fields: Mapping[str, FieldValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so a record can be shared between pipeline stages.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, name: str) -> FieldValue | None:
        return self.fields.get(name)


@dataclass(frozen=True)
class TaggedFieldMap:
    """Lossless projection of a :class:`GenericRecord` for the JSON dump."""

    kind: str
    fields: dict[str, dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "fields": self.fields}
