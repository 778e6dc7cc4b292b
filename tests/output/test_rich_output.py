from __future__ import annotations

from datetime import UTC, datetime, timedelta
from io import StringIO

from rich.console import Console

from tempconv.models.conversion import ConversionDirection, ConversionRecord
from tempconv.output.rich_output import RichOutput

NOW = datetime(2026, 1, 31, 12, 0, 0, tzinfo=UTC)


def _make_console() -> tuple[Console, StringIO]:
    """Return a ``(Console, buffer)`` pair for capturing Rich output."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=100)
    return console, buf


def _record(direction: ConversionDirection, inp: float, out: float, age: timedelta) -> ConversionRecord:
    return ConversionRecord(direction=direction, input_value=inp, output_value=out, timestamp=NOW - age)


class TestConversionResult:
    def test_renders_value_and_summary(self) -> None:
        console, buf = _make_console()
        ro = RichOutput(console)

        rec = _record(ConversionDirection.F_TO_C, 98.6, 37.0, timedelta(0))
        ro.conversion_result(rec, "98.6°F = 37.00°C")
        output = buf.getvalue()

        assert "37.00°C" in output
        assert "98.6°F = 37.00°C" in output
        assert "Result" in output

    def test_without_summary(self) -> None:
        console, buf = _make_console()
        RichOutput(console).conversion_result(
            _record(ConversionDirection.C_TO_F, 0.0, 32.0, timedelta(0))
        )
        assert "32.00°F" in buf.getvalue()


class TestHistoryTable:
    def test_renders_rows(self) -> None:
        console, buf = _make_console()
        ro = RichOutput(console)

        records = [
            _record(ConversionDirection.F_TO_C, 32.0, 0.0, timedelta(seconds=10)),
            _record(ConversionDirection.C_TO_F, 100.0, 212.0, timedelta(minutes=5)),
            _record(ConversionDirection.F_TO_C, 212.0, 100.0, timedelta(hours=3)),
        ]
        ro.history_table(records, NOW)
        output = buf.getvalue()

        assert "Conversion History" in output
        assert "F to C: 32.0 => 0.00" in output
        assert "C to F: 100.0 => 212.00" in output
        assert "Just now" in output
        assert "5 min ago" in output
        assert "3 hr ago" in output

    def test_empty_state(self) -> None:
        console, buf = _make_console()
        RichOutput(console).history_table([], NOW)
        output = buf.getvalue()
        assert "No conversion history yet" in output
        assert "Perform a conversion to see history here" in output


class TestMessages:
    def test_direction(self) -> None:
        console, buf = _make_console()
        RichOutput(console).direction(ConversionDirection.C_TO_F)
        assert "°C" in buf.getvalue()
        assert "°F" in buf.getvalue()

    def test_error(self) -> None:
        console, buf = _make_console()
        RichOutput(console).error("Please enter a valid number")
        output = buf.getvalue()
        assert "Error:" in output
        assert "Please enter a valid number" in output

    def test_command_result(self) -> None:
        console, buf = _make_console()
        ro = RichOutput(console)
        ro.command_result(True, "History cleared")
        ro.command_result(False)
        output = buf.getvalue()
        assert "OK" in output
        assert "History cleared" in output
        assert "FAILED" in output
