"""CLI command for one-shot conversions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.cli._options import global_options
from tempconv.errors import InputValidationError
from tempconv.history.store import HistoryStore
from tempconv.models.conversion import ConversionDirection
from tempconv.session import ConverterSession, Error, Success

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext

DIRECTION_CHOICE = click.Choice([d.value for d in ConversionDirection])


@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option(
    "--direction",
    type=DIRECTION_CHOICE,
    default=None,
    help="f_to_c or c_to_f (default: TEMPCONV_DEFAULT_DIRECTION)",
)
@global_options
def convert_cmd(app_ctx: AppContext, value: str, direction: str | None) -> None:
    """Convert a single VALUE.

    Negative values are accepted as-is (``tempconv convert -40``).
    """
    chosen = ConversionDirection(direction) if direction else app_ctx.settings.default_direction
    session = ConverterSession(HistoryStore(app_ctx.history_capacity), direction=chosen)

    state = session.submit(value)
    if isinstance(state, Error):
        raise InputValidationError(state.error)

    if isinstance(state, Success):
        app_ctx.formatter.conversion(state.record, session.result_summary(), command="convert")
