from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.validators import is_missing, optional_time, require_date, require_fields, require_month, require_range
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceReportRow, AttendanceSummaryRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_attendance_status(value: Any) -> AttendanceStatus:
    """Strict parse for writes: only the four canonical values are accepted."""
    try:
        return AttendanceStatus(str(value).strip())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Invalid status. Must be one of: {allowed}", reason="invalid_status")


class AttendanceService:
    """Use case: mark attendance (the only writer of attendance rows) and read it back."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark(self, data: Mapping[str, Any]) -> AttendanceRecord:
        require_fields(data, ("employee_id", "status", "date"))
        employee_id = str(data["employee_id"]).strip()
        status = parse_attendance_status(data["status"])
        work_date = require_date(data["date"], "date")
        check_in = optional_time(data.get("check_in"), "check_in")
        check_out = optional_time(data.get("check_out"), "check_out")
        notes = None if is_missing(data.get("notes")) else str(data["notes"]).strip()

        if not status.has_times:
            check_in = check_out = None

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found", reason="employee_not_found")

        record = self._attendance.upsert(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            check_in=check_in,
            check_out=check_out,
            notes=notes,
        )
        logger.debug("Marked %s as %s on %s", employee_id, status.value, work_date)
        return record

    def get_for_date(self, value: Any) -> Sequence[AttendanceReportRow]:
        work_date = require_date(value, "date")
        return self._attendance.get_report_rows(start_date=work_date, end_date=work_date)

    def get_for_month(self, *, month: Any, year: Any) -> Sequence[AttendanceReportRow]:
        y, m = require_month(month, year)
        start, end = month_bounds(y, m)
        return self._attendance.get_report_rows(start_date=start, end_date=end)

    def get_history(
        self,
        employee_id: str,
        *,
        start: Optional[Any] = None,
        end: Optional[Any] = None,
    ) -> Sequence[AttendanceReportRow]:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found", reason="employee_not_found")

        if is_missing(start) and is_missing(end):
            start_d, end_d = date.min, date.max
        else:
            start_d, end_d = require_range(start, end)

        rows = self._attendance.get_report_rows(start_date=start_d, end_date=end_d, employee_id=employee_id)
        return sorted(rows, key=lambda r: r.date, reverse=True)

    def get_roster(self, value: Any) -> Sequence[dict]:
        return self._attendance.get_roster_for_date(require_date(value, "date"))

    def get_summary(self, *, start: Any, end: Any) -> Sequence[AttendanceSummaryRow]:
        start_d, end_d = require_range(start, end)
        return self._attendance.get_summary(start_date=start_d, end_date=end_d)
