from __future__ import annotations

from rich.console import Console

from fitfocus.output.rich_output import RichOutput


class OutputFormatter:
    """Console output for progress and diagnostics.

    Progress goes to stdout and errors to stderr.  With *quiet* set,
    progress is suppressed and only errors are printed.

    Data produced by dump mode never passes through here; it is written by
    :class:`~fitfocus.output.target.OutputTarget` so that ``-o -`` output
    stays machine-readable.
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self._quiet = quiet
        self._console = Console(quiet=quiet)
        self._err_console = Console(stderr=True)
        self._rich = RichOutput(self._console, self._err_console)

    @property
    def quiet(self) -> bool:
        return self._quiet

    @property
    def rich(self) -> RichOutput:
        """Return the underlying :class:`RichOutput` instance."""
        return self._rich

    def output_error(self, *, message: str) -> None:
        """Emit a one-line error on stderr."""
        self._rich.error(message)
