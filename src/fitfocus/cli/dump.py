"""``fitfocus dump``: lossless FIT -> JSON conversion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from fitfocus.cli._options import decode_options
from fitfocus.decoder.reader import FitDecoder
from fitfocus.output.aggregate import BatchAggregator
from fitfocus.output.target import STDIN_SOURCE, OutputTarget

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fitfocus.cli.main import AppContext
    from fitfocus.decoder.options import DecodeOptions

logger = logging.getLogger(__name__)


@click.command("dump")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "-o",
    "--output",
    default=None,
    help=(
        "Output location. If omitted, each JSON file is written alongside its input."
        " If a directory, every input is written there with a '.json' extension."
        " Any other path is a single file; with several inputs it holds all records"
        " in the order they were read. '-' prints to stdout."
    ),
)
@decode_options
def dump_cmd(
    app_ctx: AppContext,
    files: tuple[Path, ...],
    output: str | None,
    decode_opts: DecodeOptions,
) -> None:
    """Convert FIT files to JSON (reads stdin when no FILE is given)."""
    target = OutputTarget.resolve(output)
    logger.debug("Dump target: %s", target)
    dump_inputs(files, target, FitDecoder(decode_opts))


def dump_inputs(
    files: Sequence[Path],
    target: OutputTarget,
    decoder: FitDecoder,
) -> None:
    """Decode every input and write it to *target*.

    Inputs are processed one at a time in order; the first failure stops
    the run, leaving whatever earlier inputs already wrote.  When all inputs
    share one file, nothing is written until every input has decoded.
    """
    if not files:
        target.write(STDIN_SOURCE, decoder.decode(click.get_binary_stream("stdin")))
        return

    if target.aggregates and len(files) > 1:
        aggregator = BatchAggregator()
        for path in files:
            aggregator.add(decoder.decode(path))
        aggregator.flush(target)
        return

    for path in files:
        target.write(path, decoder.decode(path))
