from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def effective_working_days(self, *, working_days: int, allocated_leaves: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def daily_rate(self, *, salary: Decimal, effective_working_days: int) -> Decimal:
        """Unrounded rate; callers round only for display."""
        raise NotImplementedError

    @abstractmethod
    def net_salary(self, *, daily_rate: Decimal, present_days: int, half_days: int) -> Decimal:
        raise NotImplementedError
