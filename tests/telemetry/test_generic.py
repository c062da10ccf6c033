"""Tests for the lossless generic record mapping."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fitfocus.telemetry.generic import map_record, map_records

if TYPE_CHECKING:
    from fitfocus.models.record import GenericRecord
    from tests.conftest import RecordFactory


class TestMapRecord:
    def test_kind_is_kept(self, record: RecordFactory) -> None:
        assert map_record(record("Lap")).kind == "Lap"

    def test_fields_sorted_by_name(self, record: RecordFactory) -> None:
        mapped = map_record(record(power=(200, "watts"), cadence=(90, "rpm"), altitude=(5.0, "m")))
        assert list(mapped.fields) == ["altitude", "cadence", "power"]

    def test_value_and_units(self, record: RecordFactory) -> None:
        mapped = map_record(record(heart_rate=(140, "bpm")))
        assert mapped.fields == {"heart_rate": {"value": 140, "units": "bpm"}}

    def test_every_field_kept(self, ride_records: list[GenericRecord]) -> None:
        for rec in ride_records:
            mapped = map_record(rec)
            assert set(mapped.fields) == set(rec.fields)
            assert len(mapped.fields) == len(rec.fields)

    def test_values_are_not_converted(self, record: RecordFactory) -> None:
        ts = datetime(2024, 5, 1, tzinfo=UTC)
        mapped = map_record(record(timestamp=ts, sport="cycling", grade=(-3.8, "%")))
        assert mapped.fields["timestamp"]["value"] is ts
        assert mapped.fields["sport"] == {"value": "cycling", "units": ""}
        assert mapped.fields["grade"]["value"] == -3.8

    def test_empty_record(self, record: RecordFactory) -> None:
        assert map_record(record("Event")).to_dict() == {"kind": "Event", "fields": {}}

    def test_deterministic(self, ride_records: list[GenericRecord]) -> None:
        assert map_records(ride_records) == map_records(ride_records)


class TestMapRecords:
    def test_preserves_order(self, ride_records: list[GenericRecord]) -> None:
        kinds = [m.kind for m in map_records(ride_records)]
        assert kinds == [r.kind for r in ride_records]
