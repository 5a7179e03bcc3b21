from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import (
    is_missing,
    require_date,
    require_fields,
    require_max_length,
    require_non_empty,
    require_non_negative_decimal,
    require_non_negative_int,
    require_time,
)
from ..core.constants import EMPLOYEE_ID_PREFIX, EMPLOYEE_TEXT_LIMITS
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_ON_CREATE = (
    "name",
    "age",
    "place",
    "salary",
    "job_time_from",
    "job_time_to",
    "joining_date",
    "total_leaves",
)


def parse_employee_status(value: Any) -> EmployeeStatus:
    try:
        return EmployeeStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("status must be 'active' or 'inactive'", reason="invalid_status")


def _optional_text(value: Any) -> Optional[str]:
    return None if is_missing(value) else str(value).strip()


def _check_lengths(fields: Mapping[str, Any]) -> None:
    for name, limit in EMPLOYEE_TEXT_LIMITS.items():
        if name in fields:
            require_max_length(fields[name], name, limit)


class EmployeeService:
    """Use case: manage employee records (Employee Store)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _new_id() -> str:
        return f"{EMPLOYEE_ID_PREFIX}{uuid.uuid4().hex[:8].upper()}"

    def create(self, data: Mapping[str, Any]) -> Employee:
        require_fields(data, REQUIRED_ON_CREATE)

        employee_id = _optional_text(data.get("id")) or self._new_id()

        employee = Employee(
            id=employee_id,
            name=require_non_empty(data["name"], "name"),
            age=require_non_negative_int(data["age"], "age"),
            place=_optional_text(data.get("place")),
            salary=require_non_negative_decimal(data["salary"], "salary"),
            job_time_from=require_time(data["job_time_from"], "job_time_from"),
            job_time_to=require_time(data["job_time_to"], "job_time_to"),
            joining_date=require_date(data["joining_date"], "joining_date"),
            total_leaves=require_non_negative_int(data["total_leaves"], "total_leaves"),
            status=parse_employee_status(data["status"]) if not is_missing(data.get("status")) else EmployeeStatus.ACTIVE,
            contact=_optional_text(data.get("contact")),
            image_url=_optional_text(data.get("image_url")),
        )
        _check_lengths(vars(employee))
        created = self._employees.create(employee)
        logger.info("Created employee %s", created.id)
        return created

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found", reason="employee_not_found")
        return employee

    def list_all(self, *, status: Any = None) -> Sequence[Employee]:
        parsed = None if is_missing(status) else parse_employee_status(status)
        return self._employees.list_all(status=parsed)

    def update(self, employee_id: str, data: Mapping[str, Any]) -> Employee:
        """Partial update: fields absent from `data` (or null) keep their value."""
        current = self.get(employee_id)

        changes: dict[str, Any] = {}
        if not is_missing(data.get("name")):
            changes["name"] = require_non_empty(data["name"], "name")
        if not is_missing(data.get("age")):
            changes["age"] = require_non_negative_int(data["age"], "age")
        if not is_missing(data.get("salary")):
            changes["salary"] = require_non_negative_decimal(data["salary"], "salary")
        if not is_missing(data.get("job_time_from")):
            changes["job_time_from"] = require_time(data["job_time_from"], "job_time_from")
        if not is_missing(data.get("job_time_to")):
            changes["job_time_to"] = require_time(data["job_time_to"], "job_time_to")
        if not is_missing(data.get("joining_date")):
            changes["joining_date"] = require_date(data["joining_date"], "joining_date")
        if not is_missing(data.get("total_leaves")):
            changes["total_leaves"] = require_non_negative_int(data["total_leaves"], "total_leaves")
        if not is_missing(data.get("status")):
            changes["status"] = parse_employee_status(data["status"])
        for field in ("place", "contact", "image_url"):
            if not is_missing(data.get(field)):
                changes[field] = _optional_text(data[field])
        _check_lengths(changes)

        updated = replace(current, **changes)
        if not self._employees.update(updated):
            raise NotFoundError("Employee not found", reason="employee_not_found")
        return updated

    def set_status(self, employee_id: str, status: Any = None) -> Employee:
        """Set active/inactive; with no status given, flip the current one."""
        current = self.get(employee_id)
        if is_missing(status):
            new_status = EmployeeStatus.INACTIVE if current.is_active else EmployeeStatus.ACTIVE
        else:
            new_status = parse_employee_status(status)
        return self.update(employee_id, {"status": new_status.value})

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete_with_attendance(employee_id):
            raise NotFoundError("Employee not found", reason="employee_not_found")
        logger.info("Deleted employee %s and its attendance records", employee_id)
