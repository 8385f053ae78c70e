"""
Time-scoping rules deciding how much an expense contributes to a reporting bucket.

Fixed expenses recur and are spread over every month via their monthly
equivalent. Variable expenses are one-off amounts pinned to a single
(month, year) and only count in that bucket. Historical years are built from
snapshots, which are fixed by construction.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from household.models.expense import Expense
from household.models.historical_expense import HistoricalExpense
from household.services.frequency import monthly_equivalent

logger = logging.getLogger(__name__)

# Icon given to records rebuilt from historical snapshots
HISTORICAL_ICON = "receipt"


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense-shaped working record used by the aggregation rules."""
    name: str
    amount: float
    frequency: str
    category: str
    is_variable: bool = False
    is_income: bool = False
    variable_month: Optional[int] = None
    variable_year: Optional[int] = None
    icon: Optional[str] = None

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseRecord":
        return cls(
            name=expense.name,
            amount=expense.amount,
            frequency=expense.frequency,
            category=expense.category,
            is_variable=bool(expense.is_variable),
            is_income=bool(expense.is_income),
            variable_month=expense.variable_month,
            variable_year=expense.variable_year,
            icon=expense.icon,
        )

    @classmethod
    def from_historical(cls, historical: HistoricalExpense) -> "ExpenseRecord":
        # Snapshots never keep variability or income, treat them as fixed costs
        return cls(
            name=historical.expense_name,
            amount=historical.amount,
            frequency=historical.frequency,
            category=historical.category,
            icon=HISTORICAL_ICON,
        )

    def is_in_bucket(self, month: int, year: int) -> bool:
        return self.variable_month == month and self.variable_year == year


@dataclass(frozen=True)
class ReportingContext:
    """Real-world 'today' plus the year a report is computed for."""
    today: date
    report_year: int

    @property
    def current_month(self) -> int:
        return self.today.month

    @property
    def current_year(self) -> int:
        return self.today.year

    @property
    def is_current_year(self) -> bool:
        return self.report_year == self.today.year


def _warn_if_unpinned(record: ExpenseRecord) -> None:
    if record.variable_month is None or record.variable_year is None:
        logger.warning(f"Variable expense '{record.name}' has no month/year bucket, it never counts")


def instant_amount(record: ExpenseRecord, ctx: ReportingContext) -> float:
    """Contribution to this month's total."""
    if not ctx.is_current_year:
        return monthly_equivalent(record.amount, record.frequency)

    if record.is_variable:
        _warn_if_unpinned(record)
        if record.is_in_bucket(ctx.current_month, ctx.current_year):
            return record.amount
        return 0.0

    return monthly_equivalent(record.amount, record.frequency)


def fixed_amount(record: ExpenseRecord, ctx: ReportingContext) -> float:
    """Contribution to the fixed-only monthly total (variable expenses never count)."""
    if ctx.is_current_year and record.is_variable:
        return 0.0
    return monthly_equivalent(record.amount, record.frequency)


def variable_amount_for_month(record: ExpenseRecord, ctx: ReportingContext, month: int) -> float:
    """Variable contribution to one month of the report year's trend series."""
    if not ctx.is_current_year or not record.is_variable:
        return 0.0
    if record.is_in_bucket(month, ctx.report_year):
        return record.amount
    return 0.0


def category_amount(record: ExpenseRecord, today: date) -> Optional[float]:
    """Contribution to the category split for the real current month.

    Returns None when the record is excluded from the split altogether.
    """
    if record.is_income:
        return None

    if record.is_variable:
        if record.is_in_bucket(today.month, today.year):
            return record.amount
        return None

    return monthly_equivalent(record.amount, record.frequency)
