from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow, AttendanceSummaryRow


class AttendanceRepository(Protocol):
    def upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        check_in: Optional[time] = None,
        check_out: Optional[time] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Insert-or-replace keyed on (employee_id, date) in a single statement."""

        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError

    def get_roster_for_date(self, work_date: date) -> Sequence[dict]:
        """Every employee with its record for `work_date` (status None when unmarked)."""

        raise NotImplementedError

    def get_summary(self, *, start_date: date, end_date: date) -> Sequence[AttendanceSummaryRow]:
        raise NotImplementedError
