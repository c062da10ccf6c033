"""Timed replay of decoded records as a live telemetry file.

For every sample record the driver writes a one-element JSON array holding
the current :class:`FocusSnapshot` to a fixed path, then blocks for the
configured delay.  An external display polls that path and sees the
activity unfold as if it were live.

The file is replaced atomically on each write, so a poller never reads a
half-written snapshot.  Pacing is open loop: the driver does not wait for
the consumer.
"""

from __future__ import annotations

import enum
import logging
import time
from typing import TYPE_CHECKING

from fitfocus._internal.fileio import atomic_write_text
from fitfocus.output.json_output import format_snapshot
from fitfocus.telemetry.mapper import FocusMapper

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from fitfocus.models.focus import FocusSnapshot
    from fitfocus.models.record import GenericRecord

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 250


class PlaybackState(enum.Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    DONE = "done"


class PlaybackDriver:
    """Replays one input unit at a time onto a fixed output path.

    Parameters:
        output_path: File overwritten with every snapshot.
        delay_ms: Pause after each written snapshot, in milliseconds.
        mapper: Record -> snapshot projection (default :class:`FocusMapper`).
        sleep: Blocking sleep taking seconds (default :func:`time.sleep`).
        cancel: Optional event checked before every write; once set, the
            current run stops.  When given without a custom *sleep*, the
            pause waits on the event so cancellation is not delayed.
        on_snapshot: Optional callback invoked after each snapshot is
            written, before the pause.
    """

    def __init__(
        self,
        output_path: Path,
        *,
        delay_ms: int = DEFAULT_DELAY_MS,
        mapper: FocusMapper | None = None,
        sleep: Callable[[float], object] | None = None,
        cancel: threading.Event | None = None,
        on_snapshot: Callable[[FocusSnapshot], None] | None = None,
    ) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self._path = output_path
        self._delay = delay_ms / 1000.0
        self._mapper = mapper or FocusMapper()
        self._cancel = cancel
        self._on_snapshot = on_snapshot
        if sleep is not None:
            self._sleep = sleep
        elif cancel is not None:
            self._sleep = cancel.wait
        else:
            self._sleep = time.sleep
        self._state = PlaybackState.IDLE
        self._emitted = 0

    # -- Properties -----------------------------------------------------------

    @property
    def output_path(self) -> Path:
        return self._path

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def emitted(self) -> int:
        """Snapshots written by the most recent :meth:`run`."""
        return self._emitted

    # -- Replay ---------------------------------------------------------------

    def run(self, records: Iterable[GenericRecord]) -> int:
        """Replay *records*, returning the number of snapshots written.

        The sample counter starts at ``0`` on every call.  Records that do
        not map to a snapshot are skipped without a pause.
        """
        self._emitted = 0
        self._state = PlaybackState.STREAMING
        try:
            for record in records:
                snapshot = self._mapper.map(record, self._emitted)
                if snapshot is None:
                    continue
                if self._cancelled():
                    logger.info("Playback cancelled after %d snapshots", self._emitted)
                    break
                atomic_write_text(self._path, format_snapshot(snapshot))
                self._emitted += 1
                if self._on_snapshot is not None:
                    self._on_snapshot(snapshot)
                if self._delay > 0:
                    self._sleep(self._delay)
        finally:
            self._state = PlaybackState.DONE

        logger.debug("Playback wrote %d snapshots to %s", self._emitted, self._path)
        return self._emitted

    def _cancelled(self) -> bool:
        return self._cancel is not None and self._cancel.is_set()
