from datetime import datetime
from typing import List, Optional

from pydantic import Field

from household.schemas.common import CamelModel
from household.schemas.category import CategoryResponse
from household.schemas.expense import ExpenseResponse
from household.schemas.historical_expense import HistoricalExpenseResponse
from household.schemas.split_settings import SplitSettingsResponse

BACKUP_FORMAT_VERSION = "1.0.0"


class BackupDocument(CamelModel):
    """Full JSON export of the household data."""
    expenses: List[ExpenseResponse]
    split_settings: SplitSettingsResponse
    categories: List[CategoryResponse]
    historical_expenses: List[HistoricalExpenseResponse]
    export_date: datetime
    version: str = BACKUP_FORMAT_VERSION


class ImportedExpense(CamelModel):
    name: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    frequency: str
    category: str
    is_variable: bool = False
    is_income: bool = False
    icon: Optional[str] = None
    image_url: Optional[str] = None
    variable_month: Optional[int] = Field(None, ge=1, le=12)
    variable_year: Optional[int] = None


class ImportedCategory(CamelModel):
    name: str = Field(..., min_length=1)
    icon: str = "ellipsis-h"
    color: str = "gray"


class ImportedHistoricalExpense(CamelModel):
    expense_name: str
    year: int
    amount: float
    frequency: str
    category: str


class ImportedSplitSettings(CamelModel):
    user1_name: str
    user1_percentage: int = Field(..., ge=0, le=100)
    user1_profile_image: Optional[str] = None
    user2_name: str
    user2_percentage: int = Field(..., ge=0, le=100)
    user2_profile_image: Optional[str] = None


class BackupImport(CamelModel):
    """Backup document accepted by the import endpoint. Every section is optional."""
    expenses: Optional[List[ImportedExpense]] = None
    split_settings: Optional[ImportedSplitSettings] = None
    categories: Optional[List[ImportedCategory]] = None
    historical_expenses: Optional[List[ImportedHistoricalExpense]] = None


class ImportSummary(CamelModel):
    message: str
    expenses: int
    categories: int
    historical_expenses: int


class ClearResponse(CamelModel):
    message: str
