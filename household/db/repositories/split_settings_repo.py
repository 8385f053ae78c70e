from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from household.config import get_settings
from household.models.split_settings import SplitSettings

settings = get_settings()


class SplitSettingsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_create(self) -> SplitSettings:
        """Load the split settings singleton, creating it with defaults on first access."""
        result = await self.db.execute(
            select(SplitSettings).order_by(SplitSettings.id).limit(1)
        )
        split_settings = result.scalar_one_or_none()
        if split_settings is not None:
            return split_settings

        split_settings = SplitSettings(
            user1_name=settings.DEFAULT_USER1_NAME,
            user1_percentage=settings.DEFAULT_USER1_PERCENTAGE,
            user2_name=settings.DEFAULT_USER2_NAME,
            user2_percentage=settings.DEFAULT_USER2_PERCENTAGE,
        )
        self.db.add(split_settings)
        await self.db.flush()
        await self.db.refresh(split_settings)
        return split_settings

    async def update(self, **fields: Any) -> SplitSettings:
        """Overwrite the singleton's fields, creating it first if needed."""
        split_settings = await self.get_or_create()
        for name, value in fields.items():
            setattr(split_settings, name, value)

        await self.db.flush()
        await self.db.refresh(split_settings)
        return split_settings
