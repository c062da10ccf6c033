"""Decode options: boolean CLI toggles -> decoder directives."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Directive(enum.Enum):
    """A single behaviour the decoder can be asked for."""

    DROP_UNKNOWN_FIELDS = "drop_unknown_fields"
    DROP_UNKNOWN_MESSAGES = "drop_unknown_messages"
    RETURN_NUMERIC_ENUM_VALUES = "return_numeric_enum_values"
    USE_GENERIC_SUBFIELD_NAME = "use_generic_subfield_name"
    KEEP_COMPOSITE_FIELDS = "keep_composite_fields"
    SKIP_HEADER_CRC_VALIDATION = "skip_header_crc_validation"
    SKIP_DATA_CRC_VALIDATION = "skip_data_crc_validation"


@dataclass(frozen=True)
class DecodeOptions:
    """Independent decoder toggles.

    No flag depends on another, and an unset flag simply means the
    behaviour is not requested.
    """

    drop_unknown: bool = False
    numeric_enums: bool = False
    keep_generic_names: bool = False
    keep_composite_fields: bool = False
    no_crc_check: bool = False

    def directives(self) -> frozenset[Directive]:
        """Return the directive set the decoder will honour."""
        out: set[Directive] = set()
        if self.drop_unknown:
            out.add(Directive.DROP_UNKNOWN_FIELDS)
            out.add(Directive.DROP_UNKNOWN_MESSAGES)
        if self.keep_generic_names:
            out.add(Directive.USE_GENERIC_SUBFIELD_NAME)
        if self.keep_composite_fields:
            out.add(Directive.KEEP_COMPOSITE_FIELDS)
        if self.numeric_enums:
            out.add(Directive.RETURN_NUMERIC_ENUM_VALUES)
        if self.no_crc_check:
            out.add(Directive.SKIP_HEADER_CRC_VALIDATION)
            out.add(Directive.SKIP_DATA_CRC_VALIDATION)
        return frozenset(out)
