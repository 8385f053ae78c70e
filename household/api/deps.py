from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from household.db.session import async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency.

    One transaction per request: committed when the endpoint succeeds,
    rolled back on any error.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
