from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.db.repositories.historical_expense_repo import HistoricalExpenseRepository
from household.schemas.historical_expense import HistoricalExpenseResponse

router = APIRouter()


@router.get("/{year}", response_model=List[HistoricalExpenseResponse])
async def get_historical_expenses(year: int, db: AsyncSession = Depends(get_db)):
    """Get the historical snapshots stored for a year."""
    repo = HistoricalExpenseRepository(db)
    return await repo.get_by_year(year)
