"""Shared CLI decorator for the decoder toggles."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from fitfocus.decoder.options import DecodeOptions

if TYPE_CHECKING:
    from fitfocus.cli.main import AppContext


def decode_options(f: Any) -> Any:
    """Add the five decoder flags to a command.

    The flags are folded into a single :class:`DecodeOptions` passed to the
    command as ``decode_opts``, after the :class:`AppContext`.
    """

    @click.option(
        "--no-crc-check",
        is_flag=True,
        default=False,
        help="Skip checking the header and data section CRC values",
    )
    @click.option(
        "--keep-composite-fields",
        is_flag=True,
        default=False,
        help="Keep composite fields that are expanded into 1 or more component fields",
    )
    @click.option(
        "--keep-generic-names",
        is_flag=True,
        default=False,
        help="Keep generic subfield names instead of the specific resolved name",
    )
    @click.option(
        "--numeric-enums",
        is_flag=True,
        default=False,
        help="Return enum values as numbers instead of their variant names",
    )
    @click.option(
        "--drop-unknown",
        is_flag=True,
        default=False,
        help="Drop fields and messages that aren't defined in the profile",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        decode_opts = DecodeOptions(
            drop_unknown=kwargs.pop("drop_unknown"),
            numeric_enums=kwargs.pop("numeric_enums"),
            keep_generic_names=kwargs.pop("keep_generic_names"),
            keep_composite_fields=kwargs.pop("keep_composite_fields"),
            no_crc_check=kwargs.pop("no_crc_check"),
        )
        return f(app_ctx, decode_opts=decode_opts, **kwargs)

    functools.update_wrapper(wrapper, f)
    return wrapper
