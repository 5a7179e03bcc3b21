from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import HALF_DAY_FACTOR
from .base import PayrollCalculator

CENTS = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary / (weekdays - allocated leaves), half days paid at half rate."""

    def effective_working_days(self, *, working_days: int, allocated_leaves: int) -> int:
        return max(0, int(working_days) - int(allocated_leaves))

    def daily_rate(self, *, salary: Decimal, effective_working_days: int) -> Decimal:
        if effective_working_days <= 0:
            return Decimal("0")
        return Decimal(salary) / Decimal(effective_working_days)

    def net_salary(self, *, daily_rate: Decimal, present_days: int, half_days: int) -> Decimal:
        gross = daily_rate * present_days + daily_rate * half_days * Decimal(HALF_DAY_FACTOR)
        return round2(gross)
