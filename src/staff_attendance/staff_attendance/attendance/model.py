from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_time
from ..core.enums import AttendanceStatus


def _status_value(status: Optional[AttendanceStatus]) -> Optional[str]:
    return status.value if status else None


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công, duy nhất theo (employee_id, date).

    `status` is None when the stored value is not one of the known statuses.
    """

    id: Optional[int]
    employee_id: str
    date: date
    status: Optional[AttendanceStatus]
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": _status_value(self.status),
            "check_in": format_time(self.check_in),
            "check_out": format_time(self.check_out),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model phục vụ báo cáo/xuất file (bản ghi đã join với nhân viên)."""

    employee_id: str
    employee_name: str
    date: date
    status: Optional[AttendanceStatus]
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    notes: Optional[str] = None
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Field order here is the column order of the CSV export."""
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": _status_value(self.status),
            "check_in": format_time(self.check_in),
            "check_out": format_time(self.check_out),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceSummaryRow:
    employee_id: str
    employee_name: str
    present_days: int = 0
    absent_days: int = 0
    half_days: int = 0
    leave_days: int = 0

    @property
    def total_marked_days(self) -> int:
        return self.present_days + self.absent_days + self.half_days + self.leave_days

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "half_days": self.half_days,
            "leave_days": self.leave_days,
            "total_marked_days": self.total_marked_days,
        }
