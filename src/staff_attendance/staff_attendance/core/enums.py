from __future__ import annotations

from enum import Enum
from typing import Optional


class EmployeeStatus(str, Enum):
    """Trạng thái nhân viên; chỉ ACTIVE được tính lương."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công chuẩn hoá lưu trong CSDL.

    PRESENT and HALF_DAY are paid. ABSENT (unplanned) and LEAVE (planned)
    are unpaid and both fall into the leave tally of a salary row.
    """

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half_day"
    LEAVE = "leave"

    @classmethod
    def parse(cls, value) -> Optional["AttendanceStatus"]:
        """Lenient lookup used on stored rows: unknown values map to None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except (TypeError, ValueError):
            return None

    @property
    def is_paid(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.HALF_DAY)

    @property
    def has_times(self) -> bool:
        return self.is_paid
