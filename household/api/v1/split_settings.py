from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.core.cache import invalidate_analytics_on_commit
from household.db.repositories.split_settings_repo import SplitSettingsRepository
from household.schemas.split_settings import SplitSettingsUpdate, SplitSettingsResponse

router = APIRouter()


@router.get("", response_model=SplitSettingsResponse)
async def get_split_settings(db: AsyncSession = Depends(get_db)):
    """Get the split settings, creating the defaults on first access."""
    repo = SplitSettingsRepository(db)
    return await repo.get_or_create()


@router.put("", response_model=SplitSettingsResponse)
async def update_split_settings(
    data: SplitSettingsUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace the split settings.

    Returns:
    - 200: Settings updated
    - 400: Invalid data (e.g. percentages not adding up to 100)
    """
    repo = SplitSettingsRepository(db)
    split_settings = await repo.update(**data.model_dump())
    invalidate_analytics_on_commit(db)
    return split_settings
