from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Dict, List, Optional

import requests

from ..common.datetime_utils import iter_days, month_bounds

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")


class ApiError(Exception):
    """Non-2xx response from the attendance API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class AttendanceApiClient:
    """Client to communicate with the attendance REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        max_workers: int = 8,
    ):
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout
        self._max_workers = max_workers

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        response = self._session.request(method, f"{self.base_url}{path}", timeout=self._timeout, **kwargs)
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = (body.get("error") if isinstance(body, dict) else None) or response.reason
            raise ApiError(response.status_code, message)
        return response

    def list_employees(self, *, status: Optional[str] = None) -> List[dict]:
        params = {"status": status} if status else None
        return self._request("GET", "/api/employees", params=params).json()

    def mark_attendance(
        self,
        employee_id: str,
        status: str,
        work_date: date,
        *,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> dict:
        payload = {
            "employee_id": employee_id,
            "status": status,
            "date": work_date.strftime("%Y-%m-%d"),
            "check_in": check_in,
            "check_out": check_out,
            "notes": notes,
        }
        return self._request("POST", "/api/attendance", json=payload).json()

    def fetch_day(self, work_date: date) -> List[dict]:
        data = self._request("GET", "/api/attendance", params={"date": work_date.strftime("%Y-%m-%d")}).json()
        if not isinstance(data, list):
            logger.warning("Expected a list of attendance records for %s, got %r", work_date, type(data))
            return []
        return data

    def fetch_month(self, year: int, month: int) -> Dict[str, List[dict]]:
        """Fetch every day of the month in parallel.

        A day whose request fails maps to an empty list; other days are unaffected.
        """
        start, end = month_bounds(year, month)
        days = list(iter_days(start, end))

        def _safe_fetch(day: date) -> List[dict]:
            try:
                return self.fetch_day(day)
            except (requests.RequestException, ApiError, ValueError) as e:
                logger.warning("Attendance fetch failed for %s: %s", day, e)
                return []

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            results = list(pool.map(_safe_fetch, days))

        return {d.strftime("%Y-%m-%d"): rows for d, rows in zip(days, results)}

    def fetch_salaries(self, *, month: int, year: int, include_inactive: bool = False) -> List[dict]:
        params = {"month": month, "year": year}
        if include_inactive:
            params["includeInactive"] = "true"
        return self._request("GET", "/api/salaries", params=params).json()

    def export_csv(self, start: date, end: date) -> tuple[str, str]:
        """Returns (filename, content) of the attendance export."""
        response = self._request(
            "GET",
            "/api/attendance/export",
            params={"startDate": start.strftime("%Y-%m-%d"), "endDate": end.strftime("%Y-%m-%d")},
        )
        filename = f"attendance_{start:%Y-%m-%d}_to_{end:%Y-%m-%d}.csv"
        disposition = response.headers.get("Content-Disposition", "")
        if "filename=" in disposition:
            filename = disposition.split("filename=", 1)[1].strip().strip('"')
        return filename, response.text
