import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from household.config import get_settings
from household.core.cache import invalidate_analytics_on_commit
from household.db.repositories.category_repo import CategoryRepository
from household.db.repositories.expense_repo import ExpenseRepository
from household.db.repositories.historical_expense_repo import HistoricalExpenseRepository
from household.db.repositories.split_settings_repo import SplitSettingsRepository
from household.schemas.backup import BackupDocument, BackupImport, ImportSummary
from household.schemas.category import CategoryResponse
from household.schemas.expense import ExpenseResponse
from household.schemas.historical_expense import HistoricalExpenseResponse
from household.schemas.split_settings import SplitSettingsResponse
from household.services.expense_service import normalize_expense_fields

logger = logging.getLogger(__name__)

settings = get_settings()


class BackupService:
    """Export, import and reset of the whole household data set.

    Historical snapshots are never deleted: import only adds missing ones
    and a clear leaves them in place.
    """

    def __init__(self, db: AsyncSession, today: Optional[date] = None):
        self.db = db
        self.today = today
        self.expense_repo = ExpenseRepository(db)
        self.category_repo = CategoryRepository(db)
        self.historical_repo = HistoricalExpenseRepository(db)
        self.split_settings_repo = SplitSettingsRepository(db)

    async def export(self) -> BackupDocument:
        expenses = await self.expense_repo.get_all()
        split_settings = await self.split_settings_repo.get_or_create()
        categories = await self.category_repo.get_all()
        historical = await self.historical_repo.get_all()

        return BackupDocument(
            expenses=[ExpenseResponse.model_validate(e) for e in expenses],
            split_settings=SplitSettingsResponse.model_validate(split_settings),
            categories=[CategoryResponse.model_validate(c) for c in categories],
            historical_expenses=[HistoricalExpenseResponse.model_validate(h) for h in historical],
            export_date=datetime.now(timezone.utc),
        )

    async def import_backup(self, data: BackupImport) -> ImportSummary:
        """Replace expenses and categories with the backup's content."""
        today = self.today or date.today()

        await self.expense_repo.delete_all()
        await self.category_repo.delete_all()

        category_count = 0
        seen_names = set()
        for category in data.categories or []:
            if category.name in seen_names:
                logger.warning(f"Duplicate category '{category.name}' in backup, skipped")
                continue
            seen_names.add(category.name)
            await self.category_repo.create(
                name=category.name, icon=category.icon, color=category.color
            )
            category_count += 1

        for expense in data.expenses or []:
            fields = normalize_expense_fields(expense.model_dump(), today)
            await self.expense_repo.create(**fields)

        historical_count = 0
        for historical in data.historical_expenses or []:
            if await self.historical_repo.create_if_absent(**historical.model_dump()):
                historical_count += 1

        if data.split_settings:
            await self.split_settings_repo.update(**data.split_settings.model_dump())

        invalidate_analytics_on_commit(self.db)

        summary = ImportSummary(
            message="Database imported successfully",
            expenses=len(data.expenses or []),
            categories=category_count,
            historical_expenses=historical_count,
        )
        logger.info(
            f"Backup imported: expenses={summary.expenses}, categories={summary.categories}, "
            f"new_historical={summary.historical_expenses}"
        )
        return summary

    async def clear(self) -> None:
        """Delete expenses and categories and reset the split to an even default."""
        expense_count = await self.expense_repo.delete_all()
        category_count = await self.category_repo.delete_all()

        await self.split_settings_repo.update(
            user1_name=settings.CLEARED_USER1_NAME,
            user1_percentage=settings.CLEARED_PERCENTAGE,
            user2_name=settings.CLEARED_USER2_NAME,
            user2_percentage=100 - settings.CLEARED_PERCENTAGE,
        )

        invalidate_analytics_on_commit(self.db)
        logger.info(f"Database cleared: {expense_count} expenses, {category_count} categories removed")
