from datetime import datetime
from typing import List

from household.schemas.common import CamelModel


class HistoricalExpenseResponse(CamelModel):
    id: int
    expense_name: str
    year: int
    amount: float
    frequency: str
    category: str
    created_at: datetime


class YearTransitionResponse(CamelModel):
    """Result of snapshotting the current fixed expenses into a past year."""
    year: int
    snapshotted: List[str]
    message: str
