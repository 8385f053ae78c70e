from fastapi import APIRouter

from household.api.v1 import (
    health,
    expenses,
    categories,
    split_settings,
    analytics,
    historical_expenses,
    year_transition,
    database,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(
    split_settings.router, prefix="/split-settings", tags=["split-settings"]
)
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(
    historical_expenses.router, prefix="/historical-expenses", tags=["historical"]
)
api_router.include_router(
    year_transition.router, prefix="/year-transition", tags=["historical"]
)
api_router.include_router(database.router, prefix="/database", tags=["database"])
