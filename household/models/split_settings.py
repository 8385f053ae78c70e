from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from household.db.base import Base


class SplitSettings(Base):
    """Singleton row describing how the monthly total is shared by two people."""

    __tablename__ = "split_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user1_name: Mapped[str] = mapped_column(String, nullable=False)
    user1_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    user1_profile_image: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    user2_name: Mapped[str] = mapped_column(String, nullable=False)
    user2_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    user2_profile_image: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
