from datetime import datetime
from typing import Optional

from pydantic import Field

from household.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    icon: str = "ellipsis-h"
    color: str = "gray"


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = None
    color: Optional[str] = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    icon: str
    color: str
    created_at: datetime
