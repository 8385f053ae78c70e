from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from household.config import get_settings
from household.db.base import Base

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """Pool sizing only applies to server databases; SQLite manages its own pool."""
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": settings.DATABASE_MAX_OVERFLOW,
        "pool_pre_ping": True,  # Detect stale connections before using them
    }


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    **_engine_options(settings.DATABASE_URL),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db():
    """Initialize database tables.

    When USE_ALEMBIC=True (default, production):
        - Skips create_all() since Alembic handles migrations
        - Run 'alembic upgrade head' before starting the app

    When USE_ALEMBIC=False (development):
        - Uses create_all() for convenience (creates tables if they don't exist)
    """
    import logging
    logger = logging.getLogger(__name__)

    # Import all models to ensure they're registered with SQLAlchemy
    from household.models import expense, category, split_settings, historical_expense  # noqa

    if settings.USE_ALEMBIC:
        logger.info("Database models registered. Using Alembic for migrations (USE_ALEMBIC=True).")
    else:
        logger.info("Running create_all() for database initialization (USE_ALEMBIC=False).")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
