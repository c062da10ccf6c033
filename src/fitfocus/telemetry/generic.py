"""Lossless record -> JSON-ready field map projection used by dump mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fitfocus.models.record import TaggedFieldMap

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fitfocus.models.record import GenericRecord


def map_record(record: GenericRecord) -> TaggedFieldMap:
    """Project *record* to a :class:`TaggedFieldMap`.

    Every field appears exactly once, keyed by name, in name order.
    """
    return TaggedFieldMap(
        kind=record.kind,
        fields={
            name: {"value": record.fields[name].value, "units": record.fields[name].units}
            for name in sorted(record.fields)
        },
    )


def map_records(records: Iterable[GenericRecord]) -> list[TaggedFieldMap]:
    return [map_record(r) for r in records]
