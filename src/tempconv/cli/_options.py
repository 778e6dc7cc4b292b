"""Shared CLI decorator that propagates global options to leaf commands."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from tempconv.errors import TempconvError

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


def global_options(f: Any) -> Any:
    """Add global CLI options to a leaf command.

    Allows ``--format``, ``--quiet``, ``--verbose`` and ``--capacity`` to be
    specified **after** the subcommand name (e.g.
    ``tempconv convert 98.6 --format json``).  Command-level values override
    the root-group values stored in :class:`AppContext`.
    """

    @click.option(
        "--capacity",
        "local_capacity",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum number of history entries kept",
    )
    @click.option(
        "--verbose",
        "local_verbose",
        is_flag=True,
        default=False,
        help="Enable verbose logging",
    )
    @click.option(
        "--quiet",
        "local_quiet",
        is_flag=True,
        default=False,
        help="Suppress normal output",
    )
    @click.option(
        "--format",
        "local_output_format",
        type=click.Choice(["rich", "json", "quiet"]),
        default=None,
        help="Output format (default: auto-detect)",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        local_output_format: str | None = kwargs.pop("local_output_format", None)
        local_quiet: bool = kwargs.pop("local_quiet", False)
        local_verbose: bool = kwargs.pop("local_verbose", False)
        local_capacity: int | None = kwargs.pop("local_capacity", None)

        # Command-level wins
        if local_output_format is not None:
            app_ctx.output_format = local_output_format
            app_ctx._formatter = None  # reset cached formatter
        if local_quiet:
            app_ctx.quiet = True
            app_ctx._formatter = None
        if local_verbose:
            app_ctx.verbose = True
        if local_capacity is not None:
            app_ctx.capacity = local_capacity

        app_ctx.apply_logging()
        try:
            return f(app_ctx, **kwargs)
        except TempconvError as exc:
            from tempconv.cli.main import get_command_name, handle_known_error

            if not handle_known_error(exc, app_ctx.formatter, get_command_name()):
                raise
            raise click.exceptions.Exit(1) from exc

    functools.update_wrapper(wrapper, f)
    return wrapper
