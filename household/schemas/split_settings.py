from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from household.schemas.common import CamelModel


class SplitSettingsUpdate(CamelModel):
    """Schema for replacing the split settings.

    Both percentages must add up to 100.
    """
    user1_name: str = Field(..., min_length=1)
    user1_percentage: int = Field(..., ge=0, le=100)
    user1_profile_image: Optional[str] = None
    user2_name: str = Field(..., min_length=1)
    user2_percentage: int = Field(..., ge=0, le=100)
    user2_profile_image: Optional[str] = None

    @model_validator(mode="after")
    def percentages_sum_to_100(self):
        if self.user1_percentage + self.user2_percentage != 100:
            raise ValueError("user1Percentage and user2Percentage must add up to 100")
        return self


class SplitSettingsResponse(CamelModel):
    id: int
    user1_name: str
    user1_percentage: int
    user1_profile_image: Optional[str] = None
    user2_name: str
    user2_percentage: int
    user2_profile_image: Optional[str] = None
    updated_at: datetime
