"""Delimited-text export of the employee/attendance join.

Every value is double-quoted and an embedded `"` is written as `\\"`
(a backslash escape, not the RFC 4180 doubled-quote form). Rows end with CRLF.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from ..common.validators import require_range
from ..core.constants import EXPORT_FILENAME_TEMPLATE
from ..core.exceptions import NotFoundError
from .repository import AttendanceRepository

LINE_END = "\r\n"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str
    row_count: int


def quote_field(value: Any) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '\\"') + '"'


def render_delimited(rows: Sequence[Mapping[str, Any]], *, delimiter: str = ",") -> str:
    if not rows:
        return ""
    headers = list(rows[0].keys())
    lines: list[str] = [delimiter.join(headers)]
    for row in rows:
        lines.append(delimiter.join(quote_field(row.get(h)) for h in headers))
    return "".join(line + LINE_END for line in lines)


class AttendanceExportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def export_range(self, *, start: Any, end: Any) -> ExportFile:
        start_d, end_d = require_range(start, end)
        rows: Iterable = self._attendance.get_report_rows(start_date=start_d, end_date=end_d)
        data = [r.to_dict() for r in rows]
        if not data:
            raise NotFoundError("No attendance records found for the selected date range", reason="empty_export")

        filename = EXPORT_FILENAME_TEMPLATE.format(
            start=start_d.strftime("%Y-%m-%d"),
            end=end_d.strftime("%Y-%m-%d"),
        )
        return ExportFile(filename=filename, content=render_delimited(data), row_count=len(data))
