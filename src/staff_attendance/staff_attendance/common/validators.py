from __future__ import annotations

from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_time_of_day


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if is_missing(data.get(f))]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            reason="missing_fields",
        )


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty", reason="empty_field")
    return str(value).strip()


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date", reason="invalid_date")


def optional_time(value: Any, field_name: str) -> time | None:
    if is_missing(value):
        return None
    if isinstance(value, time):
        return value
    try:
        return parse_time_of_day(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a HH:MM time", reason="invalid_time")


def require_time(value: Any, field_name: str) -> time:
    parsed = optional_time(value, field_name)
    if parsed is None:
        raise ValidationError(f"{field_name} is required", reason="missing_fields")
    return parsed


def require_non_negative_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer", reason="invalid_number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative", reason="invalid_number")
    return number


def require_non_negative_decimal(value: Any, field_name: str) -> Decimal:
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number", reason="invalid_number")
    if not number.is_finite() or number < 0:
        raise ValidationError(f"{field_name} must not be negative", reason="invalid_number")
    return number


def require_month(month: Any, year: Any) -> tuple[int, int]:
    try:
        m, y = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("month and year must be integers", reason="invalid_period")
    if not 1 <= m <= 12:
        raise ValidationError("month must be between 1 and 12", reason="invalid_period")
    if not MIN_YEAR <= y <= MAX_YEAR:
        raise ValidationError(f"year must be between {MIN_YEAR} and {MAX_YEAR}", reason="invalid_period")
    return y, m


def require_range(start: Any, end: Any) -> tuple[date, date]:
    require_fields({"startDate": start, "endDate": end}, ("startDate", "endDate"))
    start_d = require_date(start, "startDate")
    end_d = require_date(end, "endDate")
    if end_d < start_d:
        raise ValidationError("endDate must not be before startDate", reason="invalid_range")
    return start_d, end_d


def require_max_length(value: str | None, field_name: str, max_length: int) -> str | None:
    if value is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters", reason="too_long")
    return value
