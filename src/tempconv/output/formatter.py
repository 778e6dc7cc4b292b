from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.output.json_output import (
    conversion_payload,
    format_json_error,
    format_json_response,
    history_payload,
)
from tempconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime
    from io import TextIOBase

    from tempconv.models.conversion import ConversionDirection, ConversionRecord


class OutputFormatter:
    """Render conversions, history and errors as Rich or JSON.

    Selection logic:

    * If *force_format* is provided, use it unconditionally.
    * Otherwise, if *stream* (default ``sys.stdout``) is a TTY, use ``"rich"``.
    * If the stream is **not** a TTY (piped / redirected), use ``"json"``.

    In ``"quiet"`` mode the Rich console writes to *stderr*, so stdout stays
    empty.  Every public method picks its rendering from the active format;
    commands never branch on it themselves.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "quiet":
            self._console = Console(stderr=True)
        else:
            self._console = Console(file=stream) if stream is not None else Console()

        self._rich = RichOutput(self._console)

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format (``"rich"``, ``"json"``, or ``"quiet"``)."""
        return self._format

    @property
    def is_json(self) -> bool:
        return self._format == "json"

    @property
    def rich(self) -> RichOutput:
        return self._rich

    # ------------------------------------------------------------------
    # Domain output
    # ------------------------------------------------------------------

    def conversion(self, record: ConversionRecord, summary: str | None, *, command: str) -> None:
        """Show one completed conversion."""
        if self.is_json:
            self._emit(conversion_payload(record, summary), command=command)
        else:
            self._rich.conversion_result(record, summary)

    def history(self, records: Sequence[ConversionRecord], now: datetime, *, command: str) -> None:
        """Show the history newest first, ages measured against *now*."""
        if self.is_json:
            self._emit({"entries": history_payload(records, now)}, command=command)
        else:
            self._rich.history_table(records, now)

    def direction(self, direction: ConversionDirection, *, command: str) -> None:
        if self.is_json:
            self._emit({"direction": direction.value}, command=command)
        else:
            self._rich.direction(direction)

    def done(self, message: str, data: dict[str, Any], *, command: str) -> None:
        """Acknowledge a command: *data* in JSON, an OK line with *message* otherwise."""
        if self.is_json:
            self._emit(data, command=command)
        else:
            self._rich.command_result(True, message)

    def notice(self, message: str) -> None:
        """Print help or status text.  Suppressed in JSON mode to keep stdout parseable."""
        if not self.is_json:
            self._rich.info(message)

    def output_error(self, *, code: str, message: str, command: str) -> None:
        """Emit an error using the current format."""
        if self.is_json:
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command),
                file=self._stream,
            )
        else:
            self._rich.error(message)

    def _emit(self, data: Any, *, command: str) -> None:
        print(format_json_response(data=data, command=command), file=self._stream)  # noqa: T201
