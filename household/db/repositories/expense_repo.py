from typing import Optional, List, Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from household.models.expense import Expense


class ExpenseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Expense]:
        """Get all expenses, oldest first."""
        result = await self.db.execute(
            select(Expense).order_by(Expense.created_at, Expense.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, expense_id: int) -> Optional[Expense]:
        result = await self.db.execute(
            select(Expense).where(Expense.id == expense_id)
        )
        return result.scalar_one_or_none()

    async def create(self, **fields: Any) -> Expense:
        """Create a new expense from already-normalized fields."""
        expense = Expense(**fields)
        self.db.add(expense)
        await self.db.flush()
        await self.db.refresh(expense)
        return expense

    async def update(self, expense: Expense, **fields: Any) -> Expense:
        """Apply the given field values to an existing expense."""
        for name, value in fields.items():
            setattr(expense, name, value)

        await self.db.flush()
        await self.db.refresh(expense)
        return expense

    async def delete(self, expense: Expense) -> None:
        await self.db.delete(expense)
        await self.db.flush()

    async def delete_all(self) -> int:
        """Delete every expense. Returns the number of rows removed."""
        result = await self.db.execute(delete(Expense))
        await self.db.flush()
        return result.rowcount or 0
