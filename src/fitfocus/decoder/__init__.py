"""FIT decoding front-end over :mod:`fitdecode`."""

from __future__ import annotations

from fitfocus.decoder.options import DecodeOptions, Directive
from fitfocus.decoder.reader import FitDecoder, kind_label, source_name

__all__ = [
    "DecodeOptions",
    "Directive",
    "FitDecoder",
    "kind_label",
    "source_name",
]
