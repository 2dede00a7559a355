from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import MONEY_PLACES, SALARY_DAY_DIVISOR
from .base import SalaryBreakdown, SalaryCalculator

_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)


def round_money(value: Decimal) -> Decimal:
    return value.quantize(_QUANTUM, rounding=ROUND_HALF_UP)


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: salary / 30 per present day, whatever the month length.

    ``days_in_month`` is accepted but not used; the divisor stays fixed.
    Both amounts are rounded half-up to 2 places, and the total is computed
    from the unrounded daily rate.
    """

    def __init__(self, day_divisor: int = SALARY_DAY_DIVISOR):
        if int(day_divisor) <= 0:
            raise ValueError("day_divisor must be positive")
        self._divisor = Decimal(int(day_divisor))

    def calculate(self, *, monthly_salary: Decimal, present_days: int, days_in_month: int) -> SalaryBreakdown:
        per_day = Decimal(monthly_salary) / self._divisor
        return SalaryBreakdown(
            per_day_salary=round_money(per_day),
            calculated_salary=round_money(per_day * int(present_days)),
        )
