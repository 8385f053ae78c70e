import logging
from datetime import date
from typing import Optional, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from household.core.exceptions import SnapshotError
from household.db.repositories.expense_repo import ExpenseRepository
from household.db.repositories.historical_expense_repo import HistoricalExpenseRepository
from household.models.expense import Expense

logger = logging.getLogger(__name__)


def is_snapshot_candidate(expense: Expense) -> bool:
    """Only fixed, non-income expenses are preserved as historical snapshots."""
    return not expense.is_variable and not expense.is_income


class SnapshotService:
    """Copies fixed expenses into per-year historical snapshots.

    Snapshots are insert-if-absent on (expense_name, year): running a
    transition again only fills gaps and never overwrites an existing row.
    """

    def __init__(self, db: AsyncSession, today: Optional[date] = None):
        self.db = db
        self.today = today
        self.expense_repo = ExpenseRepository(db)
        self.historical_repo = HistoricalExpenseRepository(db)

    def _today(self) -> date:
        return self.today or date.today()

    def previous_year(self) -> int:
        return self._today().year - 1

    async def _snapshot(self, expense: Expense, year: int) -> bool:
        try:
            return await self.historical_repo.create_if_absent(
                expense_name=expense.name,
                year=year,
                amount=expense.amount,
                frequency=expense.frequency,
                category=expense.category,
            )
        except SQLAlchemyError as e:
            raise SnapshotError(
                f"Failed to snapshot expense '{expense.name}' for {year}",
                details={"expense_id": expense.id, "year": year, "error": str(e)},
            ) from e

    async def snapshot_year(self, target_year: Optional[int] = None) -> List[str]:
        """Snapshot every current fixed expense into target_year.

        Args:
            target_year: Year to write snapshots for, defaults to the previous real year

        Returns:
            Names of the expenses that received a new snapshot
        """
        year = target_year if target_year is not None else self.previous_year()
        expenses = await self.expense_repo.get_all()

        snapshotted = []
        for expense in expenses:
            if not is_snapshot_candidate(expense):
                continue
            if await self._snapshot(expense, year):
                snapshotted.append(expense.name)

        logger.info(
            f"Year transition for {year}: {len(snapshotted)} new snapshots "
            f"({len(expenses)} expenses checked)"
        )
        return snapshotted

    async def snapshot_before_update(
        self,
        expense: Expense,
        new_amount: Optional[float] = None,
        new_frequency: Optional[str] = None,
    ) -> bool:
        """Preserve an expense's pre-update billing terms for the previous year.

        Must run before the update is applied so the snapshot captures the
        old values. Only fires when amount or frequency actually changes on a
        fixed, non-income expense.

        Returns:
            True if a snapshot was created
        """
        amount_changed = new_amount is not None and new_amount != expense.amount
        frequency_changed = new_frequency is not None and new_frequency != expense.frequency
        if not (amount_changed or frequency_changed):
            return False
        if not is_snapshot_candidate(expense):
            return False

        year = self.previous_year()
        created = await self._snapshot(expense, year)
        if created:
            logger.info(
                f"Preserved '{expense.name}' for {year} before update "
                f"(amount={expense.amount}, frequency={expense.frequency})"
            )
        return created
