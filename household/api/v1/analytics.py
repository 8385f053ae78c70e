import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.schemas.analytics import AnalyticsResult
from household.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=AnalyticsResult)
async def get_analytics(
    year: Optional[int] = Query(None, description="Report year, defaults to the current year"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get dashboard analytics for a year.

    The current year is computed from live expenses. Any other year is
    computed from its historical snapshots, where every entry counts as a
    fixed cost.
    """
    report_year = year if year is not None else date.today().year
    logger.info(f"Analytics request: year={report_year}")

    analytics = AnalyticsService(db)
    return await analytics.get_analytics(report_year)
