from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import Severity
from ..notifications.model import Notification
from ..notifications.notifier import Notifier

DEFAULT_DELIMITER = ","


class ExportSink(Protocol):
    def __call__(self, payload: str, filename: str) -> None:
        raise NotImplementedError


def _format_field(value: Any, delimiter: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        # Only the delimiter triggers quoting; embedded quotes pass through untouched.
        return f'"{value}"' if delimiter in value else value
    return str(value)


def to_delimited_text(rows: Sequence[Mapping[str, Any]], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Header from the first row's keys, then one line per row, joined by newlines."""
    if not rows:
        return ""
    headers = list(rows[0].keys())
    lines = [delimiter.join(headers)]
    for row in rows:
        lines.append(delimiter.join(_format_field(row.get(h), delimiter) for h in headers))
    return "\n".join(lines)


class ReportExporter:
    """Turns report rows into a delimited download and tells the user how it went."""

    def __init__(self, notifier: Notifier, *, delimiter: str = DEFAULT_DELIMITER):
        self._notifier = notifier
        self._delimiter = delimiter

    def export(self, rows: Sequence[Mapping[str, Any]], filename: str, sink: ExportSink) -> Optional[str]:
        if not rows:
            self._notifier.notify(Notification("No Data", "No data to export", Severity.DANGER))
            return None

        payload = to_delimited_text(rows, self._delimiter)
        full_name = f"{filename}.csv"
        sink(payload, full_name)
        self._notifier.notify(Notification("Export Complete", f"Data exported to {full_name}", Severity.SUCCESS))
        return payload
