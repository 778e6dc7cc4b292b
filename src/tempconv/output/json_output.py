from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from tempconv.history.formatting import format_relative_time

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tempconv.models.conversion import ConversionRecord


def _serialize(obj: Any) -> Any:
    """Convert *obj* to a JSON-friendly structure.

    * :class:`pydantic.BaseModel` instances are dumped via
      :meth:`~pydantic.BaseModel.model_dump` in JSON mode, so enums and
      datetimes become strings.
    * Lists, tuples and dict values are recursed.
    * Everything else is returned as-is.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _serialize(value) for key, value in obj.items()}
    return obj


def format_json_response(*, data: Any, command: str) -> str:
    """Return a JSON envelope for a successful response.

    The envelope has the shape::

        {
          "ok": true,
          "command": "<command>",
          "data": <serialised payload>,
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    envelope: dict[str, Any] = {
        "ok": True,
        "command": command,
        "data": _serialize(data),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2, default=str, ensure_ascii=False)


def format_json_error(
    *,
    code: str,
    message: str,
    command: str,
    **extra: Any,
) -> str:
    """Return a JSON envelope for an error response.

    The envelope has the shape::

        {
          "ok": false,
          "command": "<command>",
          "error": {"code": "...", "message": "...", ...extra},
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    error_body: dict[str, Any] = {"code": code, "message": message, **extra}
    envelope: dict[str, Any] = {
        "ok": False,
        "command": command,
        "error": error_body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2, default=str, ensure_ascii=False)


def conversion_payload(record: ConversionRecord, summary: str | None = None) -> dict[str, Any]:
    """Flatten a conversion for the ``data`` field of a JSON envelope."""
    return {
        "direction": record.direction.value,
        "input": record.input_value,
        "output": record.output_value,
        "display_text": record.display_text,
        "summary": summary,
    }


def history_payload(records: Iterable[ConversionRecord], now: datetime) -> list[dict[str, Any]]:
    """Serialise history newest first, each entry with its relative age."""
    return [
        {
            **record.model_dump(mode="json"),
            "display_text": record.display_text,
            "when": format_relative_time(record, now),
        }
        for record in records
    ]
