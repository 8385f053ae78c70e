from datetime import datetime

from sqlalchemy import String, DateTime, Float, Integer, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from household.db.base import Base


class HistoricalExpense(Base):
    """Yearly snapshot of a fixed expense's billing terms, used for year-over-year trends."""
    __tablename__ = "historical_expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    expense_name: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    # Billing terms copied from the expense at snapshot time
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    frequency: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("expense_name", "year", name="uq_historical_expenses_name_year"),
        Index("idx_historical_expenses_year", "year"),
    )
