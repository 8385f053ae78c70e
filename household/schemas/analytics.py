from typing import List, Optional

from household.schemas.common import CamelModel


# Three-letter month labels of the trend series, per report locale
MONTH_LABELS = {
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "de": ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
}


def get_month_labels(locale: str) -> List[str]:
    """Month labels for a locale, falling back to English."""
    return MONTH_LABELS.get(locale, MONTH_LABELS["en"])


class MonthlyTrendPoint(CamelModel):
    month: str
    amount: float


class CategorySplit(CamelModel):
    """One slice of the category breakdown pie."""
    name: str
    value: int  # Whole percent of the non-income total
    amount: float
    color: str


class AnalyticsResult(CamelModel):
    """Dashboard analytics for one reporting year."""
    monthly_total: float
    user1_share: float
    user2_share: float
    user1_name: str
    user2_name: str
    user1_profile_image: Optional[str] = None
    user2_profile_image: Optional[str] = None
    active_expenses: int
    monthly_trend: List[MonthlyTrendPoint]
    fixed_costs_total: float
    fixed_costs_trend: float  # Signed percent change against the previous year
    split_data: List[CategorySplit]
