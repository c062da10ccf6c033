"""Record projections: lossless dump maps and live Focus telemetry."""

from __future__ import annotations

from fitfocus.telemetry.generic import map_record, map_records
from fitfocus.telemetry.mapper import FOCUS_FIELD_MAP, FieldMapping, FocusMapper
from fitfocus.telemetry.playback import DEFAULT_DELAY_MS, PlaybackDriver, PlaybackState

__all__ = [
    "DEFAULT_DELAY_MS",
    "FOCUS_FIELD_MAP",
    "FieldMapping",
    "FocusMapper",
    "PlaybackDriver",
    "PlaybackState",
    "map_record",
    "map_records",
]
