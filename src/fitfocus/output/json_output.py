"""JSON text rendering for dump files and playback snapshots."""

from __future__ import annotations

import json
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fitfocus.models.focus import FocusSnapshot
    from fitfocus.models.record import TaggedFieldMap

_COMPACT = (",", ":")


def _json_default(obj: Any) -> Any:
    """Fallback encoder for values ``json`` does not handle natively.

    * Timestamps and dates become ISO-8601 strings.
    * :class:`pydantic.BaseModel` instances are dumped by alias.
    * Raw byte fields become lowercase hex.
    """
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    if isinstance(obj, (bytes, bytearray)):
        return obj.hex()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def format_field_maps(maps: Iterable[TaggedFieldMap]) -> str:
    """Return the dump-mode JSON array for *maps* on a single line.

    The shape is::

        [{"kind": "Record", "fields": {"<name>": {"value": ..., "units": "..."}}}]
    """
    return json.dumps([m.to_dict() for m in maps], separators=_COMPACT, default=_json_default)


def format_snapshot(snapshot: FocusSnapshot) -> str:
    """Return the playback file contents: a one-element array."""
    return json.dumps([snapshot.to_wire()], separators=_COMPACT)
