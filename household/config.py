from pydantic_settings import BaseSettings
from pydantic import field_validator
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Household Expenses Backend"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api"

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://localhost:5432/household_expenses"
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10

    # Database migrations
    USE_ALEMBIC: bool = True  # If True, skip create_all() in init_db() (Alembic handles migrations)

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Split settings used when the singleton row is created lazily
    DEFAULT_USER1_NAME: str = "You"
    DEFAULT_USER1_PERCENTAGE: int = 60
    DEFAULT_USER2_NAME: str = "Partner"
    DEFAULT_USER2_PERCENTAGE: int = 40

    # Split settings applied by a full database clear
    CLEARED_USER1_NAME: str = "User 1"
    CLEARED_USER2_NAME: str = "User 2"
    CLEARED_PERCENTAGE: int = 50

    # Reserved category/icon forced onto income records
    INCOME_CATEGORY: str = "Income"
    INCOME_ICON: str = "trending-up"

    # Month labels of the trend series ("en" or "de")
    REPORT_LOCALE: str = "en"

    # Analytics cache
    ANALYTICS_CACHE_TTL_SECONDS: int = 300
    ANALYTICS_CACHE_MAX_SIZE: int = 256

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def convert_database_url(cls, v: str) -> str:
        """Convert postgresql:// to postgresql+asyncpg:// for async support."""
        if v and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra env variables to be ignored


@lru_cache()
def get_settings() -> Settings:
    return Settings()
