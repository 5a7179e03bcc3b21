from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..common.datetime_utils import format_time
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord, AttendanceReportRow, AttendanceSummaryRow
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]) if r.get("id") is not None else None,
        employee_id=str(r["employee_id"]),
        date=r["date"],
        status=AttendanceStatus.parse(r.get("status")),
        check_in=normalize_mysql_time(r.get("check_in")),
        check_out=normalize_mysql_time(r.get("check_out")),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, date, status, check_in, check_out, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out),
                    notes=VALUES(notes)
                """,
                (employee_id, work_date, status.value, check_in, check_out, notes),
            )
            cur.execute(
                """
                SELECT id, employee_id, date, status, check_in, check_out, notes
                FROM attendance_records
                WHERE employee_id=%s AND date=%s
                """,
                (employee_id, work_date),
            )
            return _to_record(fetchone(cur))

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["ar.date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("ar.employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ar.id, e.id AS employee_id, e.name AS employee_name,
                    ar.date, ar.status, ar.check_in, ar.check_out, ar.notes
                FROM attendance_records ar
                JOIN employees e ON e.id = ar.employee_id
                WHERE {where}
                ORDER BY ar.date ASC, e.name ASC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    id=int(r["id"]),
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    date=r["date"],
                    status=AttendanceStatus.parse(r.get("status")),
                    check_in=normalize_mysql_time(r.get("check_in")),
                    check_out=normalize_mysql_time(r.get("check_out")),
                    notes=r.get("notes"),
                )
                for r in fetchall(cur)
            ]

    def get_roster_for_date(self, work_date: date) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.name, e.status AS employee_status,
                       ar.status, ar.date, ar.check_in, ar.check_out, ar.notes
                FROM employees e
                LEFT JOIN attendance_records ar ON e.id = ar.employee_id AND ar.date = %s
                ORDER BY e.name
                """,
                (work_date,),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                status = AttendanceStatus.parse(r.get("status")) if r.get("status") else None
                out.append(
                    {
                        "id": str(r["id"]),
                        "name": r["name"],
                        "employee_status": r.get("employee_status"),
                        "status": status.value if status else None,
                        "date": work_date.strftime("%Y-%m-%d"),
                        "check_in": format_time(normalize_mysql_time(r.get("check_in"))),
                        "check_out": format_time(normalize_mysql_time(r.get("check_out"))),
                        "notes": r.get("notes"),
                    }
                )
            return out

    def get_summary(self, *, start_date: date, end_date: date) -> Sequence[AttendanceSummaryRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    e.id AS employee_id,
                    e.name AS employee_name,
                    COUNT(CASE WHEN ar.status = 'present' THEN 1 END) AS present_days,
                    COUNT(CASE WHEN ar.status = 'absent' THEN 1 END) AS absent_days,
                    COUNT(CASE WHEN ar.status = 'half_day' THEN 1 END) AS half_days,
                    COUNT(CASE WHEN ar.status = 'leave' THEN 1 END) AS leave_days
                FROM employees e
                LEFT JOIN attendance_records ar ON e.id = ar.employee_id
                    AND ar.date BETWEEN %s AND %s
                GROUP BY e.id, e.name
                ORDER BY e.name
                """,
                (start_date, end_date),
            )
            return [
                AttendanceSummaryRow(
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    present_days=int(r["present_days"] or 0),
                    absent_days=int(r["absent_days"] or 0),
                    half_days=int(r["half_days"] or 0),
                    leave_days=int(r["leave_days"] or 0),
                )
                for r in fetchall(cur)
            ]
