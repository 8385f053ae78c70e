from datetime import datetime
from typing import Optional

from pydantic import Field

from household.models.enums import Frequency
from household.schemas.common import CamelModel


class ExpenseBase(CamelModel):
    """Fields shared by expense create requests and responses."""
    name: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    frequency: Frequency
    category: str = Field(..., min_length=1)
    is_variable: bool = False
    is_income: bool = False
    icon: Optional[str] = None
    image_url: Optional[str] = None
    variable_month: Optional[int] = Field(None, ge=1, le=12)
    variable_year: Optional[int] = None


class ExpenseCreate(ExpenseBase):
    """Schema for creating a new expense."""
    pass


class ExpenseUpdate(CamelModel):
    """Schema for updating an expense. All fields are optional."""
    name: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    frequency: Optional[Frequency] = None
    category: Optional[str] = Field(None, min_length=1)
    is_variable: Optional[bool] = None
    is_income: Optional[bool] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None
    variable_month: Optional[int] = Field(None, ge=1, le=12)
    variable_year: Optional[int] = None


class ExpenseResponse(CamelModel):
    id: int
    name: str
    amount: float
    # Plain string: stored rows are not re-validated on the way out
    frequency: str
    category: str
    is_variable: bool
    is_income: bool
    icon: Optional[str] = None
    image_url: Optional[str] = None
    variable_month: Optional[int] = None
    variable_year: Optional[int] = None
    created_at: datetime
    updated_at: datetime
