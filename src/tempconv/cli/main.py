"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging

import click

from tempconv.errors import InputValidationError
from tempconv.models.config import AppSettings
from tempconv.output.formatter import OutputFormatter

_LOG_FORMAT = "%(asctime)s  %(levelname)-5s  [%(name)s]  %(message)s"

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    capacity: int | None = None
    _settings: AppSettings | None = dataclasses.field(default=None, repr=False)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings()
        return self._settings

    @property
    def history_capacity(self) -> int:
        """CLI ``--capacity`` if given, else ``TEMPCONV_HISTORY_CAPACITY``."""
        return self.capacity if self.capacity is not None else self.settings.history_capacity

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else (self.output_format or self.settings.output_format)
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter

    def apply_logging(self) -> None:
        configure_logging(self.verbose)


def configure_logging(verbose: bool) -> None:
    """Send ``tempconv`` log records to stderr; DEBUG when *verbose*."""
    log = logging.getLogger("tempconv")
    # Replace rather than reuse: sys.stderr may have been swapped since the last call
    for old in [h for h in log.handlers if getattr(h, "_tempconv_cli", False)]:
        log.removeHandler(old)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    handler._tempconv_cli = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option(
    "--capacity",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of history entries kept",
)
@click.version_option(package_name="tempconv")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
    capacity: int | None,
) -> None:
    """Convert temperatures between Fahrenheit and Celsius."""
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
        capacity=capacity,
    )


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import convert_cmd
    from tempconv.cli.shell import shell_cmd

    cli.add_command(convert_cmd)
    cli.add_command(shell_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        rv = cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = get_command_name()

        if handle_known_error(exc, formatter, cmd_name):
            raise SystemExit(1) from exc

        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc

    # Non-standalone click returns the code of a ctx.exit() / Exit instead of raising
    if isinstance(rv, int) and rv != 0:
        raise SystemExit(rv)


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None


def get_command_name() -> str:
    """Reconstruct a dotted command name from the Click context chain."""
    ctx = click.get_current_context(silent=True)
    parts: list[str] = []
    while ctx is not None:
        if ctx.info_name and ctx.parent is not None:
            parts.append(ctx.info_name)
        ctx = ctx.parent
    return ".".join(reversed(parts)) or "unknown"


def handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was handled and the caller should exit.
    """
    if isinstance(exc, InputValidationError):
        _handle_invalid_input(exc, formatter, cmd_name)
        return True
    return False


def _handle_invalid_input(
    exc: InputValidationError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    formatter.output_error(code=exc.kind.value, message=str(exc), command=cmd_name)
    formatter.notice("[dim]Examples: 98.6, -40, 37.5[/dim]")
