from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.core.cache import invalidate_analytics_on_commit
from household.schemas.historical_expense import YearTransitionResponse
from household.services.snapshot_service import SnapshotService

router = APIRouter()


@router.post("", response_model=YearTransitionResponse)
async def run_year_transition(
    year: Optional[int] = Query(None, description="Year to snapshot, defaults to the previous year"),
    db: AsyncSession = Depends(get_db),
):
    """
    Preserve the current fixed expenses as historical snapshots.

    Idempotent: expenses that already have a snapshot for the year are
    skipped, existing snapshots are never overwritten.
    """
    target_year = year if year is not None else date.today().year - 1

    service = SnapshotService(db)
    snapshotted = await service.snapshot_year(target_year)
    if snapshotted:
        invalidate_analytics_on_commit(db)

    return YearTransitionResponse(
        year=target_year,
        snapshotted=snapshotted,
        message=f"Historical data preserved for {target_year}",
    )
