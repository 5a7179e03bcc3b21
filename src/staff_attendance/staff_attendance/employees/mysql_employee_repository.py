from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import EmployeeStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, normalize_mysql_time
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = (
    "id, name, age, place, contact, image_url, salary, job_time_from, job_time_to, "
    "joining_date, total_leaves, status"
)


def _to_employee(r: dict) -> Employee:
    return Employee(
        id=str(r["id"]),
        name=r["name"],
        age=int(r["age"]) if r.get("age") is not None else None,
        place=r.get("place"),
        salary=Decimal(str(r.get("salary") or 0)),
        job_time_from=normalize_mysql_time(r.get("job_time_from")),
        job_time_to=normalize_mysql_time(r.get("job_time_to")),
        joining_date=r.get("joining_date"),
        total_leaves=int(r.get("total_leaves") or 0),
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
        contact=r.get("contact"),
        image_url=r.get("image_url"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if status is None:
                cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name")
            else:
                cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE status=%s ORDER BY name", (status.value,))
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(id, name, age, place, contact, image_url, salary,
                                          job_time_from, job_time_to, joining_date, total_leaves, status)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.id,
                        employee.name,
                        employee.age,
                        employee.place,
                        employee.contact,
                        employee.image_url,
                        employee.salary,
                        employee.job_time_from,
                        employee.job_time_to,
                        employee.joining_date,
                        employee.total_leaves,
                        employee.status.value,
                    ),
                )
        except mysql.connector.Error as exc:
            if is_duplicate_key(exc):
                raise ConflictError(f"Employee with id {employee.id} already exists", reason="duplicate_id") from exc
            raise
        return employee

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, age=%s, place=%s, contact=%s, image_url=%s, salary=%s,
                    job_time_from=%s, job_time_to=%s, joining_date=%s, total_leaves=%s, status=%s
                WHERE id=%s
                """,
                (
                    employee.name,
                    employee.age,
                    employee.place,
                    employee.contact,
                    employee.image_url,
                    employee.salary,
                    employee.job_time_from,
                    employee.job_time_to,
                    employee.joining_date,
                    employee.total_leaves,
                    employee.status.value,
                    employee.id,
                ),
            )
            # MySQL reports 0 affected rows when nothing changed, so check existence instead.
            cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (employee.id,))
            return fetchone(cur) is not None

    def delete_with_attendance(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (employee_id,))
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
