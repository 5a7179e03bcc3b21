from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import format_time
from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    id: str
    name: str
    age: Optional[int]
    place: Optional[str]
    salary: Decimal
    job_time_from: time
    job_time_to: time
    joining_date: date
    total_leaves: int = 0
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    contact: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "place": self.place,
            "contact": self.contact,
            "image_url": self.image_url,
            "salary": float(self.salary),
            "job_time_from": format_time(self.job_time_from),
            "job_time_to": format_time(self.job_time_to),
            "joining_date": self.joining_date.strftime("%Y-%m-%d") if self.joining_date else None,
            "total_leaves": self.total_leaves,
            "status": self.status.value,
        }
