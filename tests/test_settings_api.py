"""Tests for the split settings and category endpoints."""
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from household.config import get_settings
from household.core.categories import DEFAULT_CATEGORIES
from household.db.repositories.split_settings_repo import SplitSettingsRepository

from factories import add_category

SPLIT = {
    "user1Name": "Alex",
    "user1Percentage": 55,
    "user2Name": "Sam",
    "user2Percentage": 45,
}


class TestSplitSettings:
    @pytest.mark.asyncio
    async def test_defaults_created_on_first_read(self, client: AsyncClient):
        response = await client.get("/api/split-settings")

        assert response.status_code == 200
        data = response.json()
        assert data["user1Name"] == "You"
        assert data["user1Percentage"] == 60
        assert data["user2Name"] == "Partner"
        assert data["user2Percentage"] == 40

    @pytest.mark.asyncio
    async def test_lazy_defaults_follow_configuration(self, test_session: AsyncSession):
        settings = get_settings()

        split = await SplitSettingsRepository(test_session).get_or_create()

        assert (split.user1_name, split.user1_percentage) == (
            settings.DEFAULT_USER1_NAME,
            settings.DEFAULT_USER1_PERCENTAGE,
        )
        assert (split.user2_name, split.user2_percentage) == (
            settings.DEFAULT_USER2_NAME,
            settings.DEFAULT_USER2_PERCENTAGE,
        )

    @pytest.mark.asyncio
    async def test_update(self, client: AsyncClient):
        response = await client.put("/api/split-settings", json=SPLIT)

        assert response.status_code == 200
        assert response.json()["user1Name"] == "Alex"

        response = await client.get("/api/split-settings")
        assert response.json()["user2Percentage"] == 45

    @pytest.mark.asyncio
    async def test_percentages_must_sum_to_100(self, client: AsyncClient):
        response = await client.put(
            "/api/split-settings", json={**SPLIT, "user1Percentage": 70, "user2Percentage": 50}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_percentage_out_of_range(self, client: AsyncClient):
        response = await client.put(
            "/api/split-settings", json={**SPLIT, "user1Percentage": 120, "user2Percentage": -20}
        )

        assert response.status_code == 400


class TestCategories:
    @pytest.mark.asyncio
    async def test_empty_table_is_seeded(self, client: AsyncClient):
        response = await client.get("/api/categories")

        assert response.status_code == 200
        names = {c["name"] for c in response.json()}
        assert names == {c["name"] for c in DEFAULT_CATEGORIES}

    @pytest.mark.asyncio
    async def test_existing_categories_are_not_reseeded(
        self, client: AsyncClient, test_session: AsyncSession
    ):
        await add_category(test_session, "Pets", "yellow", icon="paw")

        response = await client.get("/api/categories")

        assert [c["name"] for c in response.json()] == ["Pets"]

    @pytest.mark.asyncio
    async def test_create_category(self, client: AsyncClient):
        response = await client.post(
            "/api/categories", json={"name": "Pets", "icon": "paw", "color": "yellow"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Pets"
        assert data["color"] == "yellow"

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, client: AsyncClient, test_session: AsyncSession):
        await add_category(test_session, "Pets", "yellow")

        response = await client.post("/api/categories", json={"name": "Pets"})

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    @pytest.mark.asyncio
    async def test_update_category(self, client: AsyncClient, test_session: AsyncSession):
        category = await add_category(test_session, "Pets", "yellow")

        response = await client.put(f"/api/categories/{category.id}", json={"color": "teal"})

        assert response.status_code == 200
        assert response.json()["color"] == "teal"
        assert response.json()["name"] == "Pets"

    @pytest.mark.asyncio
    async def test_rename_to_existing_name_conflicts(
        self, client: AsyncClient, test_session: AsyncSession
    ):
        await add_category(test_session, "Pets", "yellow")
        category = await add_category(test_session, "Garden", "green")

        response = await client.put(f"/api/categories/{category.id}", json={"name": "Pets"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_delete_category(self, client: AsyncClient, test_session: AsyncSession):
        category = await add_category(test_session, "Pets", "yellow")

        response = await client.delete(f"/api/categories/{category.id}")
        assert response.status_code == 204

        response = await client.delete(f"/api/categories/{category.id}")
        assert response.status_code == 404
