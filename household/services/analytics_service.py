import logging
from collections import defaultdict
from datetime import date
from typing import Optional, List, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from household.config import get_settings
from household.core.cache import cached
from household.core.categories import FALLBACK_CATEGORY_COLOR
from household.db.repositories.category_repo import CategoryRepository
from household.db.repositories.expense_repo import ExpenseRepository
from household.db.repositories.historical_expense_repo import HistoricalExpenseRepository
from household.db.repositories.split_settings_repo import SplitSettingsRepository
from household.schemas.analytics import (
    AnalyticsResult,
    CategorySplit,
    MonthlyTrendPoint,
    get_month_labels,
)
from household.services.frequency import monthly_equivalent
from household.services.time_scoping import (
    ExpenseRecord,
    ReportingContext,
    category_amount,
    fixed_amount,
    instant_amount,
    variable_amount_for_month,
)

logger = logging.getLogger(__name__)

settings = get_settings()


def fixed_costs_trend(current_fixed_total: float, previous_fixed_total: float) -> float:
    """Percent change of the fixed monthly total against last year's baseline.

    Returns 0 when there is no baseline to compare against.
    """
    if previous_fixed_total > 0:
        return (current_fixed_total - previous_fixed_total) / previous_fixed_total * 100
    return 0.0


class AnalyticsService:
    def __init__(self, db: AsyncSession, today: Optional[date] = None):
        self.db = db
        self.today = today
        self.expense_repo = ExpenseRepository(db)
        self.historical_repo = HistoricalExpenseRepository(db)
        self.split_settings_repo = SplitSettingsRepository(db)
        self.category_repo = CategoryRepository(db)

    def _today(self) -> date:
        return self.today or date.today()

    async def _load_working_set(self, ctx: ReportingContext) -> List[ExpenseRecord]:
        """Current expenses for the current year, snapshots for any other year."""
        if ctx.is_current_year:
            expenses = await self.expense_repo.get_all()
            return [ExpenseRecord.from_expense(e) for e in expenses]

        historical = await self.historical_repo.get_by_year(ctx.report_year)
        return [ExpenseRecord.from_historical(h) for h in historical]

    async def _previous_year_fixed_total(self, year: int) -> float:
        """Monthly fixed total of the year before, always taken from snapshots."""
        historical = await self.historical_repo.get_by_year(year - 1)
        return sum(monthly_equivalent(h.amount, h.frequency) for h in historical)

    def _monthly_trend(
        self,
        records: List[ExpenseRecord],
        ctx: ReportingContext,
        fixed_total: float,
    ) -> List[MonthlyTrendPoint]:
        trend = []
        for index, label in enumerate(get_month_labels(settings.REPORT_LOCALE)):
            month = index + 1
            variable_total = sum(
                variable_amount_for_month(record, ctx, month) for record in records
            )
            trend.append(
                MonthlyTrendPoint(month=label, amount=round(fixed_total + variable_total, 2))
            )
        return trend

    def _split_data(
        self,
        records: List[ExpenseRecord],
        category_colors: Dict[str, str],
    ) -> List[CategorySplit]:
        """Category breakdown of this month's non-income spend."""
        category_totals: Dict[str, float] = defaultdict(float)
        for record in records:
            amount = category_amount(record, self._today())
            if amount is not None:
                category_totals[record.category] += amount

        expense_total = sum(category_totals.values())

        split_data = []
        for category_name, amount in category_totals.items():
            if amount == 0:
                continue
            percentage = (amount / expense_total * 100) if expense_total > 0 else 0
            split_data.append(
                CategorySplit(
                    name=category_name,
                    value=int(round(percentage)),
                    amount=round(amount, 2),
                    color=category_colors.get(category_name, FALLBACK_CATEGORY_COLOR),
                )
            )

        # Sort by amount descending for the pie chart
        split_data.sort(key=lambda x: x.amount, reverse=True)
        return split_data

    async def compute_analytics(self, year: Optional[int] = None) -> AnalyticsResult:
        """Compute dashboard analytics for a reporting year.

        The current real year is computed from live expenses; any other year
        from the historical snapshots stored for it.

        Args:
            year: Report year, defaults to the current real year

        Returns:
            AnalyticsResult with totals, per-person shares, the 12-month trend,
            the fixed-cost trend against the previous year and the category split
        """
        today = self._today()
        ctx = ReportingContext(today=today, report_year=year or today.year)

        records = await self._load_working_set(ctx)
        split_settings = await self.split_settings_repo.get_or_create()
        categories = await self.category_repo.get_all()
        category_colors = {c.name: c.color for c in categories}

        monthly_total = sum(instant_amount(record, ctx) for record in records)
        fixed_total = sum(fixed_amount(record, ctx) for record in records)
        previous_fixed_total = await self._previous_year_fixed_total(ctx.report_year)
        trend_percent = fixed_costs_trend(fixed_total, previous_fixed_total)

        user1_share = monthly_total * split_settings.user1_percentage / 100
        user2_share = monthly_total * split_settings.user2_percentage / 100

        logger.info(
            f"Analytics computed: year={ctx.report_year}, current_year={ctx.is_current_year}, "
            f"records={len(records)}, monthly_total={monthly_total:.2f}, "
            f"fixed_total={fixed_total:.2f}, previous_fixed_total={previous_fixed_total:.2f}"
        )

        return AnalyticsResult(
            monthly_total=round(monthly_total, 2),
            user1_share=round(user1_share, 2),
            user2_share=round(user2_share, 2),
            user1_name=split_settings.user1_name,
            user2_name=split_settings.user2_name,
            user1_profile_image=split_settings.user1_profile_image,
            user2_profile_image=split_settings.user2_profile_image,
            active_expenses=len(records),
            monthly_trend=self._monthly_trend(records, ctx, fixed_total),
            fixed_costs_total=round(fixed_total, 2),
            fixed_costs_trend=round(trend_percent, 2),
            split_data=self._split_data(records, category_colors),
        )

    @cached(include_month=True)
    async def get_analytics(self, year: int) -> AnalyticsResult:
        """Cached variant of compute_analytics used by the API."""
        return await self.compute_analytics(year)
