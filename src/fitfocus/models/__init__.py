from __future__ import annotations

from fitfocus.models.config import AppSettings
from fitfocus.models.focus import RESERVED_FIELDS, SUPPORTED_FIELDS, FocusSnapshot
from fitfocus.models.record import FieldValue, GenericRecord, TaggedFieldMap

__all__ = [
    # config
    "AppSettings",
    # focus
    "RESERVED_FIELDS",
    "SUPPORTED_FIELDS",
    "FocusSnapshot",
    # record
    "FieldValue",
    "GenericRecord",
    "TaggedFieldMap",
]
