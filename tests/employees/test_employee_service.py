from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.staff_attendance.staff_attendance.core.enums import AttendanceStatus, EmployeeStatus
from src.staff_attendance.staff_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.staff_attendance.staff_attendance.employees.service import EmployeeService

VALID = {
    "name": "Tran Thi B",
    "age": 34,
    "place": "Front desk",
    "salary": "14000",
    "job_time_from": "08:00",
    "job_time_to": "17:00",
    "joining_date": "2023-06-01",
    "total_leaves": 0,
}


def test_create_generates_id_and_defaults_to_active(employees_repo):
    svc = EmployeeService(employees_repo)

    created = svc.create(VALID)

    assert created.id.startswith("EMP")
    assert created.status == EmployeeStatus.ACTIVE
    assert created.salary == Decimal("14000")
    assert created.total_leaves == 0
    assert employees_repo.get_by_id(created.id) == created


@pytest.mark.parametrize("field", ["name", "age", "place", "salary", "job_time_from", "job_time_to", "joining_date", "total_leaves"])
def test_create_rejects_missing_required_field(employees_repo, field):
    data = {k: v for k, v in VALID.items() if k != field}

    with pytest.raises(ValidationError) as exc:
        EmployeeService(employees_repo).create(data)

    assert field in str(exc.value)
    assert employees_repo.rows == {}


def test_create_rejects_negative_salary(employees_repo):
    with pytest.raises(ValidationError):
        EmployeeService(employees_repo).create({**VALID, "salary": -1})


@pytest.mark.parametrize(
    "field, value",
    [("id", "E" * 21), ("name", "N" * 101), ("place", "P" * 101), ("contact", "0" * 21), ("image_url", "u" * 256)],
)
def test_create_rejects_values_wider_than_their_column(employees_repo, field, value):
    with pytest.raises(ValidationError) as exc:
        EmployeeService(employees_repo).create({**VALID, field: value})

    assert exc.value.reason == "too_long"
    assert employees_repo.rows == {}


def test_update_rejects_over_long_contact(employees_repo, employee):
    with pytest.raises(ValidationError):
        EmployeeService(employees_repo).update(employee.id, {"contact": "0" * 21})

    assert employees_repo.get_by_id(employee.id) == employee


def test_create_with_taken_id_conflicts(employees_repo):
    svc = EmployeeService(employees_repo)
    svc.create({**VALID, "id": "EMP042"})

    with pytest.raises(ConflictError):
        svc.create({**VALID, "id": "EMP042", "name": "Someone else"})


def test_get_missing_employee_raises_not_found(employees_repo):
    with pytest.raises(NotFoundError):
        EmployeeService(employees_repo).get("nope")


def test_partial_update_only_changes_given_fields(employees_repo, employee):
    svc = EmployeeService(employees_repo)

    updated = svc.update(employee.id, {"salary": 45000, "place": None})

    assert updated.salary == Decimal("45000")
    assert updated.name == employee.name
    assert updated.place == employee.place
    assert updated.job_time_from == employee.job_time_from
    assert updated.total_leaves == employee.total_leaves
    assert employees_repo.get_by_id(employee.id) == updated


def test_update_missing_employee_raises_not_found(employees_repo):
    with pytest.raises(NotFoundError):
        EmployeeService(employees_repo).update("nope", {"salary": 1})


def test_list_filters_by_status(employees_repo, employee_factory):
    employees_repo.create(employee_factory("A1", name="Active"))
    employees_repo.create(employee_factory("I1", name="Inactive", status=EmployeeStatus.INACTIVE))
    svc = EmployeeService(employees_repo)

    assert [e.id for e in svc.list_all(status="inactive")] == ["I1"]
    assert {e.id for e in svc.list_all()} == {"A1", "I1"}
    with pytest.raises(ValidationError):
        svc.list_all(status="retired")


def test_set_status_toggles_when_not_given(employees_repo, employee):
    svc = EmployeeService(employees_repo)

    assert svc.set_status(employee.id).status == EmployeeStatus.INACTIVE
    assert svc.set_status(employee.id).status == EmployeeStatus.ACTIVE
    assert svc.set_status(employee.id, "inactive").status == EmployeeStatus.INACTIVE


def test_delete_cascades_attendance(employees_repo, attendance_repo, employee):
    for day in (2, 3, 6):
        attendance_repo.upsert(employee_id=employee.id, work_date=date(2025, 1, day), status=AttendanceStatus.PRESENT)
    svc = EmployeeService(employees_repo)

    svc.delete(employee.id)

    assert attendance_repo.records_for(employee.id) == []
    with pytest.raises(NotFoundError):
        svc.get(employee.id)


def test_delete_unknown_employee_raises_not_found(employees_repo, attendance_repo):
    with pytest.raises(NotFoundError):
        EmployeeService(employees_repo).delete("nope")
