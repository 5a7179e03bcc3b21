from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Optional

import pytest

from src.staff_attendance.staff_attendance.attendance.model import AttendanceRecord, AttendanceReportRow, AttendanceSummaryRow
from src.staff_attendance.staff_attendance.container import build_services
from src.staff_attendance.staff_attendance.core.enums import AttendanceStatus, EmployeeStatus
from src.staff_attendance.staff_attendance.core.exceptions import ConflictError
from src.staff_attendance.staff_attendance.employees.model import Employee


class InMemoryEmployees:
    def __init__(self):
        self.rows: dict[str, Employee] = {}
        self.attendance: Optional["InMemoryAttendance"] = None

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.rows.get(employee_id)

    def list_all(self, *, status=None):
        items = [e for e in self.rows.values() if status is None or e.status == status]
        return sorted(items, key=lambda e: e.name)

    def create(self, employee: Employee) -> Employee:
        if employee.id in self.rows:
            raise ConflictError("duplicate", reason="duplicate_id")
        self.rows[employee.id] = employee
        return employee

    def update(self, employee: Employee) -> bool:
        if employee.id not in self.rows:
            return False
        self.rows[employee.id] = employee
        return True

    def delete_with_attendance(self, employee_id: str) -> bool:
        if self.attendance is not None:
            self.attendance.delete_for_employee(employee_id)
        return self.rows.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._id = 0
        self.upsert_calls = 0

    def __len__(self) -> int:
        return len(self._by_key)

    def records_for(self, employee_id: str) -> list[AttendanceRecord]:
        return [r for (eid, _), r in self._by_key.items() if eid == employee_id]

    def put_raw(self, record: AttendanceRecord) -> None:
        """Store a row as-is (e.g. one with an unreadable status)."""
        self._by_key[(record.employee_id, record.date)] = record

    def delete_for_employee(self, employee_id: str) -> None:
        for key in [k for k in self._by_key if k[0] == employee_id]:
            del self._by_key[key]

    def upsert(self, *, employee_id, work_date, status, check_in=None, check_out=None, notes=None):
        self.upsert_calls += 1
        existing = self._by_key.get((employee_id, work_date))
        if existing:
            record_id = existing.id
        else:
            self._id += 1
            record_id = self._id
        record = AttendanceRecord(
            id=record_id,
            employee_id=employee_id,
            date=work_date,
            status=status,
            check_in=check_in,
            check_out=check_out,
            notes=notes,
        )
        self._by_key[(employee_id, work_date)] = record
        return record

    def get_report_rows(self, *, start_date, end_date, employee_id=None):
        rows = []
        for r in self._by_key.values():
            if not start_date <= r.date <= end_date:
                continue
            if employee_id is not None and r.employee_id != employee_id:
                continue
            employee = self._employees.get_by_id(r.employee_id)
            rows.append(
                AttendanceReportRow(
                    id=r.id,
                    employee_id=r.employee_id,
                    employee_name=employee.name if employee else "",
                    date=r.date,
                    status=r.status,
                    check_in=r.check_in,
                    check_out=r.check_out,
                    notes=r.notes,
                )
            )
        rows.sort(key=lambda r: (r.date, r.employee_name))
        return rows

    def get_roster_for_date(self, work_date):
        out = []
        for e in self._employees.list_all():
            r = self._by_key.get((e.id, work_date))
            out.append(
                {
                    "id": e.id,
                    "name": e.name,
                    "employee_status": e.status.value,
                    "status": r.status.value if r and r.status else None,
                    "date": work_date.strftime("%Y-%m-%d"),
                    "check_in": None,
                    "check_out": None,
                    "notes": r.notes if r else None,
                }
            )
        return out

    def get_summary(self, *, start_date, end_date):
        out = []
        for e in self._employees.list_all():
            records = [r for r in self.records_for(e.id) if start_date <= r.date <= end_date]
            out.append(
                AttendanceSummaryRow(
                    employee_id=e.id,
                    employee_name=e.name,
                    present_days=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
                    absent_days=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
                    half_days=sum(1 for r in records if r.status == AttendanceStatus.HALF_DAY),
                    leave_days=sum(1 for r in records if r.status == AttendanceStatus.LEAVE),
                )
            )
        return out


def make_employee(employee_id: str = "EMP001", **overrides) -> Employee:
    values = dict(
        id=employee_id,
        name="Nguyen Van A",
        age=30,
        place="Warehouse",
        salary=Decimal("30000"),
        job_time_from=time(9, 0),
        job_time_to=time(18, 0),
        joining_date=date(2024, 1, 15),
        total_leaves=2,
        status=EmployeeStatus.ACTIVE,
    )
    values.update(overrides)
    return Employee(**values)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    repo = InMemoryAttendance(employees_repo)
    employees_repo.attendance = repo
    return repo


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo=employees_repo, attendance_repo=attendance_repo)


@pytest.fixture
def employee(employees_repo) -> Employee:
    return employees_repo.create(make_employee())


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.staff_attendance.staff_attendance.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def employee_factory():
    return make_employee
