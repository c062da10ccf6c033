"""Shared fixtures for fitfocus tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fitfocus.models.record import FieldValue, GenericRecord

RecordFactory = Callable[..., GenericRecord]


def make_record(kind: str = "Record", **fields: Any) -> GenericRecord:
    """Build a record; each keyword is ``name=value`` or ``name=(value, units)``."""
    converted: dict[str, FieldValue] = {}
    for name, spec in fields.items():
        if isinstance(spec, tuple):
            value, units = spec
        else:
            value, units = spec, ""
        converted[name] = FieldValue(value=value, units=units)
    return GenericRecord(kind=kind, fields=converted)


@pytest.fixture()
def record() -> RecordFactory:
    """Factory fixture wrapping :func:`make_record`."""
    return make_record


@pytest.fixture()
def ride_records() -> list[GenericRecord]:
    """A short activity: file header, three samples, a lap and a session."""
    return [
        make_record("FileId", type="activity", manufacturer="garmin"),
        make_record(
            "Record",
            power=(210, "watts"),
            heart_rate=(131, "bpm"),
            cadence=(88, "rpm"),
            distance=(12.4, "m"),
            enhanced_speed=(8.5, "m/s"),
            enhanced_altitude=(102.6, "m"),
            grade=(1.9, "%"),
            temperature=(19, "C"),
        ),
        make_record(
            "Record",
            power=(245, "watts"),
            heart_rate=(134, "bpm"),
            distance=(21.0, "m"),
        ),
        make_record("Event", event="timer", event_type="stop_all"),
        make_record("Record", power=(0, "watts"), grade=(-3.8, "%")),
        make_record("Lap", total_elapsed_time=(3.0, "s")),
        make_record("Session", sport="cycling"),
    ]
