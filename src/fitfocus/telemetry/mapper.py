"""FIT ``record`` message -> :class:`FocusSnapshot` projection.

Only a handful of per-sample fields feed the live display; everything else
in the message is dropped.  The projection is a lookup table keyed by FIT
field name, each entry naming the snapshot slot and the conversion that
fills it.

The speed scale and the height baseline match the conventions of the
display consumer and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fitfocus._internal.units import mps_to_kmh, trunc_signed, trunc_unsigned
from fitfocus.errors import FieldShapeError
from fitfocus.models.focus import FocusSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from fitfocus.models.record import GenericRecord

SAMPLE_KIND = "Record"

SPEED_SCALE = 275.0
"""Multiplier applied to km/h before flooring to the integer speed slot."""

HEIGHT_BASELINE = 450
"""Constant added to the truncated altitude in metres."""


def _to_uint(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeError("a non-negative integer")
    return value


def _to_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("a number")
    return float(value)


def _distance(value: Any) -> int:
    return trunc_unsigned(_to_number(value))


def _speed(value: Any) -> int:
    """m/s -> display speed units: ``floor(v * 3.6 * 275.0)``."""
    return trunc_unsigned(mps_to_kmh(_to_number(value)) * SPEED_SCALE)


def _slope(value: Any) -> int:
    return trunc_signed(_to_number(value))


def _height(value: Any) -> int:
    return HEIGHT_BASELINE + trunc_unsigned(_to_number(value))


@dataclass(frozen=True)
class FieldMapping:
    """Maps a FIT field to a snapshot slot."""

    slot: str
    """Snapshot attribute name (e.g. ``"heartrate"``)."""

    transform: Callable[[Any], int]
    """Callable ``(value) -> int``.  Raises :class:`TypeError` on a bad shape."""


FOCUS_FIELD_MAP: dict[str, FieldMapping] = {
    "power": FieldMapping("power", _to_uint),
    "heart_rate": FieldMapping("heartrate", _to_uint),
    "cadence": FieldMapping("cadence", _to_uint),
    "distance": FieldMapping("distance", _distance),
    "enhanced_speed": FieldMapping("speed", _speed),
    "grade": FieldMapping("slope", _slope),
    "enhanced_altitude": FieldMapping("height", _height),
}


class FocusMapper:
    """Maps decoded FIT records to live telemetry snapshots.

    Usage::

        mapper = FocusMapper()
        snapshot = mapper.map(record, sample_index=0)
        if snapshot is not None:
            ...
    """

    def __init__(self, field_map: dict[str, FieldMapping] | None = None) -> None:
        self._field_map = field_map or FOCUS_FIELD_MAP

    def map(self, record: GenericRecord, sample_index: int) -> FocusSnapshot | None:
        """Return the snapshot for *record*, or ``None`` if it is not a sample.

        ``time`` is set to *sample_index*; it is never derived from the
        record's own timestamp.

        Raises:
            FieldShapeError: A mapped field holds a value of the wrong type.
        """
        if record.kind != SAMPLE_KIND:
            return None

        values: dict[str, int] = {"time": sample_index}
        for field_name, field_value in record.fields.items():
            mapping = self._field_map.get(field_name)
            if mapping is None:
                continue
            try:
                values[mapping.slot] = mapping.transform(field_value.value)
            except TypeError as exc:
                raise FieldShapeError(field_name, field_value.value, str(exc)) from exc
        return FocusSnapshot(**values)

    @property
    def mapped_fields(self) -> frozenset[str]:
        """Return the set of FIT field names that have mappings."""
        return frozenset(self._field_map.keys())
