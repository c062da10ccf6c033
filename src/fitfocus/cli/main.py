"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging

import click
from pydantic import ValidationError

from fitfocus import __version__
from fitfocus.models.config import AppSettings
from fitfocus.output.formatter import OutputFormatter

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    verbose: bool
    quiet: bool
    _settings: AppSettings | None = dataclasses.field(default=None, repr=False)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings()
        return self._settings

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            self._formatter = OutputFormatter(quiet=self.quiet)
        return self._formatter


def _configure_logging(verbose: bool) -> None:
    """Route debug logging through Rich on stderr when ``--verbose`` is set."""
    if not verbose:
        return
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    root = logging.getLogger("fitfocus")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="fitfocus")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, default=False, help="Suppress progress output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Convert FIT activity files to JSON, or replay them as live telemetry."""
    app_ctx = AppContext(verbose=verbose, quiet=quiet)
    if app_ctx.settings.verbose:
        app_ctx.verbose = True
    _configure_logging(app_ctx.verbose)
    ctx.obj = app_ctx


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from fitfocus.cli.dump import dump_cmd
    from fitfocus.cli.playback import playback_cmd

    cli.add_command(dump_cmd)
    cli.add_command(playback_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler.

    Any failure ends the run with exit status 1 and a one-line message on
    stderr.
    """
    try:
        cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        formatter.output_error(message=_error_message(exc))
        raise SystemExit(1) from exc


def _error_message(exc: Exception) -> str:
    """Reduce *exc* to the one-line diagnostic printed on stderr."""
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        setting = ".".join(str(part) for part in first["loc"])
        return f"Invalid setting {setting}: {first['msg']}"
    text = str(exc) or type(exc).__name__
    return text.splitlines()[0]


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None
