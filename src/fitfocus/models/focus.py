"""The fixed "Focus" live-telemetry snapshot schema.

The schema is dictated by the display consumer that polls the playback
file, so every key is always present.  Only :data:`SUPPORTED_FIELDS` are
ever populated from FIT data; the slots in :data:`RESERVED_FIELDS` exist for
the consumer's benefit and always carry their defaults (``0`` or ``"--"``).
A zero in a reserved slot means "not measured", not a measured zero.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_camel

PLACEHOLDER = "--"


class FocusSnapshot(BaseModel):
    """One sample of the live telemetry feed."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # identity
    name: str = PLACEHOLDER
    country: str = PLACEHOLDER
    team: str = PLACEHOLDER
    team_code: str = PLACEHOLDER
    # power
    power: NonNegativeInt = 0
    avg_power: NonNegativeInt = 0
    nrm_power: NonNegativeInt = 0
    max_power: NonNegativeInt = 0
    # cadence
    cadence: NonNegativeInt = 0
    avg_cadence: NonNegativeInt = 0
    max_cadence: NonNegativeInt = 0
    # heart rate
    heartrate: NonNegativeInt = 0
    avg_heartrate: NonNegativeInt = 0
    max_heartrate: NonNegativeInt = 0
    # kinematics
    time: NonNegativeInt = 0
    distance: NonNegativeInt = 0
    height: NonNegativeInt = 0
    speed: NonNegativeInt = 0
    # session
    tss: NonNegativeInt = 0
    calories: NonNegativeInt = 0
    draft: NonNegativeInt = 0
    wind_speed: NonNegativeInt = 0
    wind_angle: NonNegativeInt = 0
    slope: int = 0
    # event / lap counters
    event_laps_total: NonNegativeInt = 0
    event_laps_done: int = 0
    event_distance_total: NonNegativeInt = 0
    event_distance_done: NonNegativeInt = 0
    event_distance_to_next_location: NonNegativeInt = 0
    event_next_location: NonNegativeInt = 0
    event_position: NonNegativeInt = 0

    def to_wire(self) -> dict[str, int | str]:
        """Return the snapshot keyed by the consumer's camelCase names."""
        return self.model_dump(by_alias=True)


SUPPORTED_FIELDS: frozenset[str] = frozenset(
    {"time", "power", "heartrate", "cadence", "distance", "speed", "slope", "height"}
)
"""Slots filled from FIT ``record`` messages."""

RESERVED_FIELDS: frozenset[str] = frozenset(FocusSnapshot.model_fields) - SUPPORTED_FIELDS
"""Slots kept for the consumer but never populated."""
