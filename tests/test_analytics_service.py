"""Tests for the aggregation engine behind the dashboard analytics."""
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from household.db.repositories.split_settings_repo import SplitSettingsRepository
from household.services.analytics_service import AnalyticsService, fixed_costs_trend

from factories import add_category, add_expense, add_historical

TODAY = date(2025, 3, 15)


def service(session: AsyncSession, today: date = TODAY) -> AnalyticsService:
    return AnalyticsService(session, today=today)


class TestFixedCostsTrend:
    def test_percent_change_against_previous_year(self):
        assert fixed_costs_trend(1100, 1000) == pytest.approx(10.0)

    def test_decrease_is_negative(self):
        assert fixed_costs_trend(900, 1000) == pytest.approx(-10.0)

    def test_no_baseline_is_zero(self):
        assert fixed_costs_trend(500, 0) == 0


class TestCurrentYear:
    @pytest.mark.asyncio
    async def test_single_fixed_expense(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100, frequency="monthly")

        result = await service(test_session).compute_analytics(2025)

        assert result.monthly_total == 100
        assert result.fixed_costs_total == 100
        assert result.active_expenses == 1
        assert [point.amount for point in result.monthly_trend] == [100] * 12

    @pytest.mark.asyncio
    async def test_yearly_expense_is_normalized(self, test_session: AsyncSession):
        await add_expense(test_session, name="Insurance", amount=1200, frequency="yearly")

        result = await service(test_session).compute_analytics(2025)

        assert result.monthly_total == 100
        assert result.fixed_costs_total == 100

    @pytest.mark.asyncio
    async def test_variable_expense_in_current_month(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)
        await add_expense(
            test_session,
            name="Car repair",
            amount=50,
            category="Transportation",
            is_variable=True,
            variable_month=3,
            variable_year=2025,
        )

        result = await service(test_session).compute_analytics(2025)

        assert result.monthly_total == 150
        assert result.fixed_costs_total == 100
        assert result.monthly_trend[2].amount == 150
        assert result.monthly_trend[3].amount == 100

    @pytest.mark.asyncio
    async def test_variable_expense_outside_current_month(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)
        await add_expense(
            test_session,
            name="Car repair",
            amount=50,
            is_variable=True,
            variable_month=3,
            variable_year=2025,
        )

        result = await service(test_session, today=date(2025, 4, 2)).compute_analytics(2025)

        assert result.monthly_total == 100
        # Still shows up in March of the trend series
        assert result.monthly_trend[2].amount == 150

    @pytest.mark.asyncio
    async def test_month_labels(self, test_session: AsyncSession):
        result = await service(test_session).compute_analytics(2025)

        assert [point.month for point in result.monthly_trend][:3] == ["Jan", "Feb", "Mar"]
        assert len(result.monthly_trend) == 12

    @pytest.mark.asyncio
    async def test_income_counts_in_totals_but_not_in_split(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)
        await add_expense(
            test_session, name="Salary", amount=2000, category="Income", is_income=True
        )

        result = await service(test_session).compute_analytics(2025)

        assert result.monthly_total == 2100
        assert [entry.name for entry in result.split_data] == ["Housing"]

    @pytest.mark.asyncio
    async def test_legacy_frequency_label(self, test_session: AsyncSession):
        await add_expense(test_session, amount=600, frequency="halbjährlich")

        result = await service(test_session).compute_analytics(2025)

        assert result.monthly_total == 100

    @pytest.mark.asyncio
    async def test_defaults_to_current_year(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)

        result = await service(test_session).compute_analytics()

        assert result.monthly_total == 100


class TestHistoricalYear:
    @pytest.mark.asyncio
    async def test_year_without_snapshots_is_empty(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)

        result = await service(test_session).compute_analytics(2023)

        assert result.monthly_total == 0
        assert result.fixed_costs_total == 0
        assert result.active_expenses == 0
        assert result.split_data == []
        assert [point.amount for point in result.monthly_trend] == [0] * 12

    @pytest.mark.asyncio
    async def test_snapshots_replace_live_expenses(self, test_session: AsyncSession):
        await add_expense(test_session, amount=150)
        await add_historical(test_session, year=2024, amount=1200, frequency="yearly")

        result = await service(test_session).compute_analytics(2024)

        assert result.monthly_total == 100
        assert result.fixed_costs_total == 100
        assert result.active_expenses == 1
        assert [point.amount for point in result.monthly_trend] == [100] * 12


class TestFixedCostsTrendAgainstSnapshots:
    @pytest.mark.asyncio
    async def test_trend_uses_previous_year_snapshots(self, test_session: AsyncSession):
        await add_expense(test_session, amount=1100)
        await add_historical(test_session, year=2024, amount=1000)

        result = await service(test_session).compute_analytics(2025)

        assert result.fixed_costs_trend == 10.0

    @pytest.mark.asyncio
    async def test_trend_is_zero_without_snapshots(self, test_session: AsyncSession):
        await add_expense(test_session, amount=1100)

        result = await service(test_session).compute_analytics(2025)

        assert result.fixed_costs_trend == 0


class TestShares:
    @pytest.mark.asyncio
    async def test_default_split_is_sixty_forty(self, test_session: AsyncSession):
        await add_expense(test_session, amount=1000)

        result = await service(test_session).compute_analytics(2025)

        assert result.user1_share == 600
        assert result.user2_share == 400
        assert result.user1_name == "You"
        assert result.user2_name == "Partner"

    @pytest.mark.asyncio
    async def test_stored_percentages_are_applied_as_is(self, test_session: AsyncSession):
        await add_expense(test_session, amount=1000)
        await SplitSettingsRepository(test_session).update(
            user1_percentage=70, user2_percentage=50
        )

        result = await service(test_session).compute_analytics(2025)

        assert result.user1_share == 700
        assert result.user2_share == 500


class TestSplitData:
    @pytest.mark.asyncio
    async def test_percentages_and_colors(self, test_session: AsyncSession):
        await add_category(test_session, "Housing", "red")
        await add_expense(test_session, amount=600, category="Housing")
        await add_expense(test_session, name="Power", amount=400, category="Utilities")

        result = await service(test_session).compute_analytics(2025)

        assert [(s.name, s.value, s.amount, s.color) for s in result.split_data] == [
            ("Housing", 60, 600, "red"),
            ("Utilities", 40, 400, "gray"),
        ]

    @pytest.mark.asyncio
    async def test_rounded_values_need_not_sum_to_hundred(self, test_session: AsyncSession):
        await add_expense(test_session, name="A", amount=100, category="A")
        await add_expense(test_session, name="B", amount=100, category="B")
        await add_expense(test_session, name="C", amount=100, category="C")

        result = await service(test_session).compute_analytics(2025)

        assert [s.value for s in result.split_data] == [33, 33, 33]

    @pytest.mark.asyncio
    async def test_other_months_variable_expenses_are_excluded(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)
        await add_expense(
            test_session,
            name="Holiday",
            amount=900,
            category="Entertainment",
            is_variable=True,
            variable_month=7,
            variable_year=2025,
        )

        result = await service(test_session).compute_analytics(2025)

        assert [s.name for s in result.split_data] == ["Housing"]
        assert result.split_data[0].value == 100

    @pytest.mark.asyncio
    async def test_zero_amount_categories_are_dropped(self, test_session: AsyncSession):
        await add_expense(test_session, amount=100)
        await add_expense(test_session, name="Free trial", amount=0, category="Entertainment")

        result = await service(test_session).compute_analytics(2025)

        assert [s.name for s in result.split_data] == ["Housing"]


class TestCaching:
    @pytest.mark.asyncio
    async def test_repeated_calls_hit_the_cache(self, test_session: AsyncSession):
        from household.core.cache import get_cache_stats

        await add_expense(test_session, amount=100)
        analytics = AnalyticsService(test_session)

        first = await analytics.get_analytics(2025)
        second = await analytics.get_analytics(2025)

        assert first is second
        assert get_cache_stats()["hits"] == 1
