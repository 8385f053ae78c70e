from typing import Optional, List, Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from household.core.categories import DEFAULT_CATEGORIES
from household.models.category import Category


class CategoryRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Category]:
        """Get all categories ordered by name."""
        result = await self.db.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        result = await self.db.execute(
            select(Category).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Category]:
        result = await self.db.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()

    async def create(self, name: str, icon: str, color: str) -> Category:
        category = Category(name=name, icon=icon, color=color)
        self.db.add(category)
        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def update(self, category: Category, **fields: Any) -> Category:
        for name, value in fields.items():
            setattr(category, name, value)

        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def delete(self, category: Category) -> None:
        await self.db.delete(category)
        await self.db.flush()

    async def delete_all(self) -> int:
        result = await self.db.execute(delete(Category))
        await self.db.flush()
        return result.rowcount or 0

    async def seed_defaults(self) -> List[Category]:
        """Insert the default category set and return the full list."""
        for data in DEFAULT_CATEGORIES:
            self.db.add(Category(**data))
        await self.db.flush()
        return await self.get_all()
