from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import count_weekdays, is_weekend, month_bounds
from ..common.validators import require_month
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, round2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceCounts:
    present_days: int = 0
    half_days: int = 0
    absent_days: int = 0
    on_leave_days: int = 0

    @property
    def leave_days(self) -> int:
        """Unpaid days: unplanned absences plus planned leave."""
        return self.absent_days + self.on_leave_days


@dataclass(frozen=True)
class SalaryRow:
    employee_id: str
    name: str
    working_days: int
    allocated_leaves: int
    counts: AttendanceCounts
    daily_rate: Decimal
    salary: Decimal
    net_salary: Decimal
    status: EmployeeStatus
    effective_working_days: int

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "workingDays": self.working_days,
            "allocatedLeaves": self.allocated_leaves,
            "presentDays": self.counts.present_days,
            "halfDays": self.counts.half_days,
            "leaveDays": self.counts.leave_days,
            "absentDays": self.counts.absent_days,
            "onLeaveDays": self.counts.on_leave_days,
            "dailyRate": float(round2(self.daily_rate)),
            "salary": float(self.salary),
            "netSalary": float(self.net_salary),
            "status": self.status.value,
            "effectiveWorkingDays": self.effective_working_days,
        }


def count_attendance(rows: Iterable[AttendanceReportRow]) -> AttendanceCounts:
    """Tally one employee's records; weekend dates and unknown statuses are skipped."""
    tally = {status: 0 for status in AttendanceStatus}
    for r in rows:
        if r.status is None or is_weekend(r.date):
            continue
        tally[r.status] += 1
    return AttendanceCounts(
        present_days=tally[AttendanceStatus.PRESENT],
        half_days=tally[AttendanceStatus.HALF_DAY],
        absent_days=tally[AttendanceStatus.ABSENT],
        on_leave_days=tally[AttendanceStatus.LEAVE],
    )


class SalaryService:
    """Use case: derive monthly payouts from attendance history."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def salary_row(self, employee: Employee, *, working_days: int, counts: AttendanceCounts) -> SalaryRow:
        effective = self._calculator.effective_working_days(
            working_days=working_days,
            allocated_leaves=employee.total_leaves,
        )
        rate = self._calculator.daily_rate(salary=employee.salary, effective_working_days=effective)
        net = self._calculator.net_salary(
            daily_rate=rate,
            present_days=counts.present_days,
            half_days=counts.half_days,
        )
        return SalaryRow(
            employee_id=employee.id,
            name=employee.name,
            working_days=working_days,
            allocated_leaves=employee.total_leaves,
            counts=counts,
            daily_rate=rate,
            salary=employee.salary,
            net_salary=net,
            status=employee.status,
            effective_working_days=effective,
        )

    def compute_month(self, *, month: Any, year: Any, include_inactive: bool = False) -> list[SalaryRow]:
        y, m = require_month(month, year)
        start, end = month_bounds(y, m)
        working_days = count_weekdays(y, m)

        status_filter = None if include_inactive else EmployeeStatus.ACTIVE
        employees = self._employees.list_all(status=status_filter)

        by_employee: dict[str, list[AttendanceReportRow]] = defaultdict(list)
        for r in self._attendance.get_report_rows(start_date=start, end_date=end):
            by_employee[r.employee_id].append(r)

        rows = [
            self.salary_row(e, working_days=working_days, counts=count_attendance(by_employee.get(e.id, ())))
            for e in employees
        ]
        logger.info("Computed salaries for %s employees (%04d-%02d)", len(rows), y, m)
        return rows
