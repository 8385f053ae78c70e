from household.models.expense import Expense
from household.models.category import Category
from household.models.split_settings import SplitSettings
from household.models.historical_expense import HistoricalExpense
from household.models.enums import Frequency

__all__ = [
    "Expense",
    "Category",
    "SplitSettings",
    "HistoricalExpense",
    "Frequency",
]
