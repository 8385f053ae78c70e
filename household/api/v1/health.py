from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text

from household.api.deps import get_db
from household.core.cache import get_cache_stats

router = APIRouter()


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Check if service is ready (database connection)."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "ready", "database": "connected", "cache": get_cache_stats()}
    except Exception as e:
        return {"status": "not_ready", "database": "disconnected", "error": str(e)}
