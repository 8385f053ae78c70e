import logging
from datetime import date
from typing import Optional, List, Dict, Any

from sqlalchemy.ext.asyncio import AsyncSession

from household.config import get_settings
from household.core.cache import invalidate_analytics_on_commit
from household.core.categories import PLACEHOLDER_ICONS
from household.core.exceptions import ResourceNotFoundError
from household.db.repositories.expense_repo import ExpenseRepository
from household.models.expense import Expense
from household.schemas.expense import ExpenseCreate, ExpenseUpdate
from household.services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)

settings = get_settings()

# Fields an update may explicitly clear; nulls for any other field are ignored
NULLABLE_FIELDS = {"icon", "image_url", "variable_month", "variable_year"}


def normalize_expense_fields(fields: Dict[str, Any], today: date) -> Dict[str, Any]:
    """Apply the write-boundary rules to a complete set of expense fields.

    - Income records always use the reserved income category and icon
    - "default" or empty icons are stored as None (use the category icon)
    - Variable expenses without a bucket are pinned to the current month
    """
    normalized = dict(fields)

    if normalized.get("is_income"):
        normalized["category"] = settings.INCOME_CATEGORY
        normalized["icon"] = settings.INCOME_ICON
    elif normalized.get("icon") in PLACEHOLDER_ICONS:
        normalized["icon"] = None

    if normalized.get("is_variable"):
        if normalized.get("variable_month") is None:
            normalized["variable_month"] = today.month
        if normalized.get("variable_year") is None:
            normalized["variable_year"] = today.year

    return normalized


def _dump(data) -> Dict[str, Any]:
    fields = data.model_dump(exclude_unset=True)
    if fields.get("frequency") is not None:
        fields["frequency"] = fields["frequency"].value
    return fields


class ExpenseService:
    def __init__(self, db: AsyncSession, today: Optional[date] = None):
        self.db = db
        self.today = today
        self.expense_repo = ExpenseRepository(db)
        self.snapshot_service = SnapshotService(db, today=today)

    def _today(self) -> date:
        return self.today or date.today()

    async def list_expenses(self) -> List[Expense]:
        return await self.expense_repo.get_all()

    async def get_expense(self, expense_id: int) -> Expense:
        expense = await self.expense_repo.get_by_id(expense_id)
        if not expense:
            raise ResourceNotFoundError(f"Expense {expense_id} not found")
        return expense

    async def create_expense(self, data: ExpenseCreate) -> Expense:
        fields = normalize_expense_fields(_dump(data), self._today())
        fields.setdefault("is_variable", False)
        fields.setdefault("is_income", False)

        expense = await self.expense_repo.create(**fields)
        invalidate_analytics_on_commit(self.db)
        logger.info(f"Expense created: id={expense.id}, name='{expense.name}', variable={expense.is_variable}")
        return expense

    async def update_expense(self, expense_id: int, data: ExpenseUpdate) -> Expense:
        """Update an expense, snapshotting its old terms first when they change.

        The snapshot and the update share the request's transaction: if the
        snapshot cannot be written the update is not applied either.
        """
        expense = await self.get_expense(expense_id)
        changes = {
            name: value
            for name, value in _dump(data).items()
            if value is not None or name in NULLABLE_FIELDS
        }

        await self.snapshot_service.snapshot_before_update(
            expense,
            new_amount=changes.get("amount"),
            new_frequency=changes.get("frequency"),
        )

        # Normalize against the merged record so income/variable rules see the final state
        current = {
            "category": expense.category,
            "icon": expense.icon,
            "is_income": expense.is_income,
            "is_variable": expense.is_variable,
            "variable_month": expense.variable_month,
            "variable_year": expense.variable_year,
        }
        merged = normalize_expense_fields({**current, **changes}, self._today())
        for name in current:
            if name in changes or merged[name] != current[name]:
                changes[name] = merged[name]

        expense = await self.expense_repo.update(expense, **changes)
        invalidate_analytics_on_commit(self.db)
        return expense

    async def delete_expense(self, expense_id: int) -> None:
        expense = await self.get_expense(expense_id)
        await self.expense_repo.delete(expense)
        invalidate_analytics_on_commit(self.db)
        logger.info(f"Expense deleted: id={expense_id}")
