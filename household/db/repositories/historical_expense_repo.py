import logging
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from household.models.historical_expense import HistoricalExpense

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class HistoricalExpenseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_year(self, year: int) -> List[HistoricalExpense]:
        """Get all snapshots for a year."""
        result = await self.db.execute(
            select(HistoricalExpense)
            .where(HistoricalExpense.year == year)
            .order_by(HistoricalExpense.expense_name)
        )
        return list(result.scalars().all())

    async def get_all(self) -> List[HistoricalExpense]:
        """Get every snapshot, newest year first."""
        result = await self.db.execute(
            select(HistoricalExpense).order_by(
                HistoricalExpense.year.desc(), HistoricalExpense.expense_name
            )
        )
        return list(result.scalars().all())

    async def get_by_name_and_year(
        self, expense_name: str, year: int
    ) -> Optional[HistoricalExpense]:
        result = await self.db.execute(
            select(HistoricalExpense).where(
                HistoricalExpense.expense_name == expense_name,
                HistoricalExpense.year == year,
            )
        )
        return result.scalar_one_or_none()

    async def create_if_absent(
        self,
        expense_name: str,
        year: int,
        amount: float,
        frequency: str,
        category: str,
    ) -> bool:
        """Insert a snapshot unless one already exists for (expense_name, year).

        Relies on the (expense_name, year) unique constraint so concurrent
        callers cannot create duplicates. Existing snapshots are never
        overwritten.

        Returns:
            True if a new row was inserted, False if one already existed.
        """
        values = {
            "expense_name": expense_name,
            "year": year,
            "amount": amount,
            "frequency": frequency,
            "category": category,
        }

        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)

        if insert is None:
            # No native insert-if-absent, check first
            existing = await self.get_by_name_and_year(expense_name, year)
            if existing:
                return False
            self.db.add(HistoricalExpense(**values))
            await self.db.flush()
            return True

        stmt = (
            insert(HistoricalExpense)
            .values(**values)
            .on_conflict_do_nothing(index_elements=["expense_name", "year"])
            .returning(HistoricalExpense.id)
        )
        result = await self.db.execute(stmt)
        inserted_id = result.scalar_one_or_none()

        if inserted_id is None:
            logger.debug(f"Snapshot for '{expense_name}' ({year}) already exists, skipped")
            return False
        return True
