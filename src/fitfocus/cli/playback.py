"""``fitfocus playback``: replay FIT records as a live telemetry file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from fitfocus.cli._options import decode_options
from fitfocus.decoder.reader import FitDecoder, source_name
from fitfocus.telemetry.playback import PlaybackDriver

if TYPE_CHECKING:
    from fitfocus.cli.main import AppContext
    from fitfocus.decoder.options import DecodeOptions

logger = logging.getLogger(__name__)


@click.command("playback")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="File overwritten with each snapshot [default: focus.json]",
)
@click.option(
    "-d",
    "--delay",
    type=click.IntRange(min=0),
    default=None,
    help="Pause between snapshots in milliseconds [default: 250]",
)
@decode_options
def playback_cmd(
    app_ctx: AppContext,
    files: tuple[Path, ...],
    output: Path | None,
    delay: int | None,
    decode_opts: DecodeOptions,
) -> None:
    """Replay FIT sample records into a JSON file at a fixed pace.

    Inputs are played one after the other; each restarts the sample clock
    at zero.  Reads stdin when no FILE is given.
    """
    settings = app_ctx.settings
    if output is None:
        output = Path(settings.playback_output)
    if delay is None:
        delay = settings.playback_delay_ms

    formatter = app_ctx.formatter
    decoder = FitDecoder(decode_opts)
    driver = PlaybackDriver(output, delay_ms=delay, on_snapshot=formatter.rich.sample)

    sources: list[Path | None] = list(files) or [None]
    for index, path in enumerate(sources, start=1):
        source = path if path is not None else click.get_binary_stream("stdin")
        name = source_name(source)
        formatter.rich.playback_started(name, output, index, len(sources))
        records = decoder.decode(source)
        count = driver.run(records)
        formatter.rich.playback_finished(name, count)
