"""Row builders shared by the test modules."""
from sqlalchemy.ext.asyncio import AsyncSession

from household.models.expense import Expense
from household.models.historical_expense import HistoricalExpense
from household.models.category import Category


async def add_expense(session: AsyncSession, **overrides) -> Expense:
    """Insert an expense with sensible defaults."""
    data = {
        "name": "Rent",
        "amount": 100.0,
        "frequency": "monthly",
        "category": "Housing",
        "is_variable": False,
        "is_income": False,
        "icon": "home",
    }
    data.update(overrides)
    expense = Expense(**data)
    session.add(expense)
    await session.flush()
    await session.refresh(expense)
    return expense


async def add_historical(session: AsyncSession, **overrides) -> HistoricalExpense:
    """Insert a historical snapshot with sensible defaults."""
    data = {
        "expense_name": "Rent",
        "year": 2024,
        "amount": 100.0,
        "frequency": "monthly",
        "category": "Housing",
    }
    data.update(overrides)
    historical = HistoricalExpense(**data)
    session.add(historical)
    await session.flush()
    await session.refresh(historical)
    return historical


async def add_category(session: AsyncSession, name: str, color: str, icon: str = "home") -> Category:
    category = Category(name=name, color=color, icon=icon)
    session.add(category)
    await session.flush()
    await session.refresh(category)
    return category
