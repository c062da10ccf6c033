"""Cross-input accumulation for single-file dump output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from fitfocus.models.record import GenericRecord
    from fitfocus.output.target import OutputTarget

logger = logging.getLogger(__name__)


class BatchAggregator:
    """Collects the records of every input before one write.

    Records keep input order, then decode order within an input.  Everything
    is held in memory until :meth:`flush`.
    """

    def __init__(self) -> None:
        self._records: list[GenericRecord] = []
        self._units = 0

    @property
    def records(self) -> list[GenericRecord]:
        return list(self._records)

    @property
    def count(self) -> int:
        """Total records collected."""
        return len(self._records)

    @property
    def units(self) -> int:
        """Number of input units added."""
        return self._units

    def add(self, records: Iterable[GenericRecord]) -> None:
        self._records.extend(records)
        self._units += 1

    def flush(self, target: OutputTarget) -> Path | None:
        """Write everything collected to *target* in one go."""
        logger.debug("Writing %d records from %d inputs", self.count, self._units)
        return target.write(None, self._records)
