from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalaryBreakdown:
    per_day_salary: Decimal
    calculated_salary: Decimal


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, *, monthly_salary: Decimal, present_days: int, days_in_month: int) -> SalaryBreakdown:
        raise NotImplementedError
