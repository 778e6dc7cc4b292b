"""Interactive conversion shell.

Each line is either a temperature to convert or a ``:command``.  History
is kept in memory for as long as the shell runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from tempconv.cli._options import global_options
from tempconv.cli.convert import DIRECTION_CHOICE
from tempconv.history.store import HistoryStore
from tempconv.models.conversion import ConversionDirection
from tempconv.session import ConverterSession, Error, Success

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext
    from tempconv.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Enter a temperature to convert it, or one of:
  :swap           switch between F to C and C to F
  :f2c / :c2f     pick a direction
  :history        show conversion history
  :clear          discard the current result
  :clear-history  empty the history
  :help           show this message
  :quit           leave the shell"""

_QUIT = frozenset({":quit", ":q", ":exit"})


@click.command("shell")
@click.option(
    "--direction",
    type=DIRECTION_CHOICE,
    default=None,
    help="Starting direction (default: TEMPCONV_DEFAULT_DIRECTION)",
)
@global_options
def shell_cmd(app_ctx: AppContext, direction: str | None) -> None:
    """Convert temperatures interactively and keep a history."""
    chosen = ConversionDirection(direction) if direction else app_ctx.settings.default_direction
    session = ConverterSession(HistoryStore(app_ctx.history_capacity), direction=chosen)
    ShellRunner(session, app_ctx.formatter).run()


class ShellRunner:
    """Reads lines, feeds them to a :class:`ConverterSession`, renders results."""

    def __init__(self, session: ConverterSession, formatter: OutputFormatter) -> None:
        self._session = session
        self._fmt = formatter

    def run(self) -> None:
        if not self._fmt.is_json:
            self._fmt.notice(HELP_TEXT)
            self._fmt.rich.direction(self._session.direction)

        while True:
            prompt = f"°{self._session.direction.source_unit}"
            try:
                line = click.prompt(
                    prompt,
                    default="",
                    show_default=False,
                    prompt_suffix=" > ",
                    err=self._fmt.is_json,
                )
            except click.exceptions.Abort:
                break
            if not self.handle(line):
                break

        logger.debug("Shell exited with %d history entries", len(self._session.history))

    def handle(self, line: str) -> bool:
        """Process one input line.  Returns ``False`` when the shell should exit."""
        text = line.strip()
        if text in _QUIT:
            return False
        if text.startswith(":"):
            self._command(text)
        else:
            self._convert(line)
        return True

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def _convert(self, line: str) -> None:
        state = self._session.submit(line)
        if isinstance(state, Error):
            self._fmt.output_error(
                code=state.error.value,
                message=state.message,
                command="shell.convert",
            )
        elif isinstance(state, Success):
            self._fmt.conversion(
                state.record,
                self._session.result_summary(),
                command="shell.convert",
            )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _command(self, text: str) -> None:
        session = self._session
        if text == ":swap":
            session.toggle_direction()
            self._show_direction()
        elif text == ":f2c":
            session.set_direction(ConversionDirection.F_TO_C)
            self._show_direction()
        elif text == ":c2f":
            session.set_direction(ConversionDirection.C_TO_F)
            self._show_direction()
        elif text == ":history":
            self._show_history()
        elif text == ":clear":
            session.reset()
            self._done("shell.clear", "Cleared.")
        elif text == ":clear-history":
            session.clear_history()
            self._done("shell.clear_history", "History cleared")
        elif text == ":help":
            self._fmt.notice(HELP_TEXT)
        else:
            self._fmt.output_error(
                code="unknown_command",
                message=f"Unknown command '{escape(text)}'. Type :help for a list.",
                command="shell",
            )

    def _show_direction(self) -> None:
        self._fmt.direction(self._session.direction, command="shell.direction")

    def _show_history(self) -> None:
        self._fmt.history(
            self._session.history.entries,
            self._session.now(),
            command="shell.history",
        )

    def _done(self, command: str, message: str) -> None:
        self._fmt.done(message, {"history_size": len(self._session.history)}, command=command)
