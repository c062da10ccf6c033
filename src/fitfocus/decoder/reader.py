"""Decode FIT files into :class:`~fitfocus.models.record.GenericRecord` lists.

Wraps :mod:`fitdecode`.  Binary decoding (header and CRC validation,
definition messages, base types, component expansion) is entirely the
library's job; this module applies the :class:`DecodeOptions` directives to
its output and turns every data message into an immutable record.

A unit is decoded completely before anything is returned, so a failure
anywhere in the file yields a :class:`~fitfocus.errors.DecodeError` and no
partial result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import fitdecode

from fitfocus.decoder.options import DecodeOptions, Directive
from fitfocus.errors import DecodeError
from fitfocus.models.record import FieldValue, GenericRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_UNKNOWN_PREFIX = "unknown_"

Source = Path | IO[bytes]


def kind_label(mesg_name: str) -> str:
    """Turn a fitdecode message name into its PascalCase kind label.

    ``"record"`` -> ``"Record"``, ``"file_id"`` -> ``"FileId"``,
    ``"unknown_233"`` -> ``"UnknownVariant233"``.
    """
    if mesg_name.startswith(_UNKNOWN_PREFIX):
        return "UnknownVariant" + mesg_name[len(_UNKNOWN_PREFIX) :]
    return "".join(part[:1].upper() + part[1:] for part in mesg_name.split("_"))


def source_name(source: Source) -> str:
    """Human-readable name of an input unit for messages."""
    if isinstance(source, Path):
        return str(source)
    return getattr(source, "name", None) or "<stdin>"


def _is_unknown(name: str) -> bool:
    return name.startswith(_UNKNOWN_PREFIX)


def _normalize(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_normalize(v) for v in value]
    return value


class FitDecoder:
    """Decodes one FIT input unit at a time under a fixed option set."""

    def __init__(self, options: DecodeOptions | None = None) -> None:
        self._options = options or DecodeOptions()
        self._directives = self._options.directives()

    @property
    def options(self) -> DecodeOptions:
        return self._options

    def decode(self, source: Source) -> list[GenericRecord]:
        """Decode *source* (a path or a binary stream) into records.

        Raises:
            DecodeError: The unit is malformed (bad header, CRC mismatch
                unless disabled, invalid definition message, truncated data).
            OSError: *source* is a path that cannot be opened.
        """
        name = source_name(source)
        fileish: Any = str(source) if isinstance(source, Path) else source
        check_crc = (
            fitdecode.CrcCheck.DISABLED
            if Directive.SKIP_DATA_CRC_VALIDATION in self._directives
            else fitdecode.CrcCheck.RAISE
        )
        try:
            with fitdecode.FitReader(
                fileish,
                check_crc=check_crc,
                error_handling=fitdecode.ErrorHandling.RAISE,
            ) as reader:
                records = list(self._convert_frames(reader))
        except fitdecode.FitError as exc:
            raise DecodeError(f"{name}: {exc}", source=name) from exc

        logger.debug("Decoded %d records from %s", len(records), name)
        return records

    # -- Internals ------------------------------------------------------------

    def _convert_frames(self, frames: Iterable[Any]) -> Iterable[GenericRecord]:
        drop_messages = Directive.DROP_UNKNOWN_MESSAGES in self._directives
        for frame in frames:
            if not isinstance(frame, fitdecode.FitDataMessage):
                continue
            if drop_messages and _is_unknown(frame.name):
                logger.debug("Dropping unknown message %s", frame.name)
                continue
            yield self._convert_message(frame)

    def _convert_message(self, frame: Any) -> GenericRecord:
        fields: dict[str, FieldValue] = {}
        for field_data in frame.fields:
            converted = self._convert_field(field_data)
            if converted is not None:
                # Later occurrences of a name override earlier ones.
                fields[converted[0]] = converted[1]
        return GenericRecord(kind=kind_label(frame.name), fields=fields)

    def _convert_field(self, field_data: Any) -> tuple[str, FieldValue] | None:
        directives = self._directives
        name: str = field_data.name
        field = getattr(field_data, "field", None)
        parent = getattr(field_data, "parent_field", None)
        # Expanded components carry no field definition of their own.
        is_expanded = getattr(field_data, "field_def", None) is None

        if Directive.DROP_UNKNOWN_FIELDS in directives and _is_unknown(name):
            return None
        if (
            Directive.KEEP_COMPOSITE_FIELDS not in directives
            and not is_expanded
            and getattr(field, "components", None)
        ):
            return None

        value = field_data.value
        if value is None:
            return None

        if Directive.RETURN_NUMERIC_ENUM_VALUES in directives and isinstance(value, str):
            field_type = getattr(field, "type", None)
            if getattr(field_type, "enum", None):
                value = field_data.raw_value

        if (
            Directive.USE_GENERIC_SUBFIELD_NAME in directives
            and not is_expanded
            and parent is not None
        ):
            name = parent.name

        return name, FieldValue(value=_normalize(value), units=field_data.units or "")
