"""Dump-mode output location resolution and writing.

Output location rules (``-o/--output``):

* not given: write ``<input>.json`` beside every input file.
* an existing directory: write ``<dir>/<input stem>.json`` per input.
* ``-``: print each input's JSON as one line on standard output.
* anything else: a single file.  With several inputs the records of all of
  them are concatenated into one array (see
  :class:`~fitfocus.output.aggregate.BatchAggregator`).
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fitfocus._internal.fileio import write_text
from fitfocus.output.json_output import format_field_maps
from fitfocus.telemetry.generic import map_records

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fitfocus.models.record import GenericRecord

logger = logging.getLogger(__name__)

STDOUT_MARKER = "-"

# Name standard input goes by when output files are derived from it.
STDIN_SOURCE = Path("<stdin>")


class TargetKind(enum.Enum):
    INPLACE = "inplace"
    LOCAL_DIRECTORY = "local_directory"
    LOCAL_FILE = "local_file"
    STDOUT = "stdout"


@dataclass(frozen=True)
class OutputTarget:
    """Where dump-mode JSON goes."""

    kind: TargetKind
    path: Path | None = None

    @classmethod
    def resolve(cls, location: str | Path | None) -> OutputTarget:
        """Pick the target for an ``--output`` value (``None`` if omitted)."""
        if location is None:
            return cls(TargetKind.INPLACE)
        path = Path(location)
        if path.is_dir():
            return cls(TargetKind.LOCAL_DIRECTORY, path)
        if str(location) == STDOUT_MARKER:
            return cls(TargetKind.STDOUT)
        return cls(TargetKind.LOCAL_FILE, path)

    @property
    def aggregates(self) -> bool:
        """True when every input shares one output file."""
        return self.kind is TargetKind.LOCAL_FILE

    def destination(self, source: Path | None) -> Path | None:
        """Return the file written for *source*, or ``None`` for stdout.

        Standard input (*source* ``None`` or :data:`STDIN_SOURCE`) is named
        ``<stdin>``, so in-place output for it is ``<stdin>.json`` in the
        working directory.
        """
        if self.kind is TargetKind.STDOUT:
            return None
        if source is None:
            source = STDIN_SOURCE
        if self.kind is TargetKind.INPLACE:
            return source.with_suffix(".json")
        if self.kind is TargetKind.LOCAL_DIRECTORY:
            assert self.path is not None
            return self.path / f"{source.stem}.json"
        assert self.path is not None
        return self.path

    def write(self, source: Path | None, records: Iterable[GenericRecord]) -> Path | None:
        """Serialize *records* and write them for *source*.

        Returns the file written, or ``None`` when printed to stdout.

        Raises:
            OSError: The destination cannot be created or written.
        """
        text = format_field_maps(map_records(records))
        dest = self.destination(source)
        if dest is None:
            print(text, file=sys.stdout)  # noqa: T201
            return None
        write_text(dest, text)
        logger.debug("Wrote %s", dest)
        return dest
