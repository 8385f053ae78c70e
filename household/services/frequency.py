"""
Frequency normalizer: converts a billed amount into its monthly equivalent.

One-time costs are spread over twelve months. Nothing is rounded here;
rounding happens once, when analytics results are emitted.
"""

import logging
from typing import Optional, Union

from household.models.enums import Frequency, LEGACY_FREQUENCY_ALIASES

logger = logging.getLogger(__name__)


def parse_frequency(value: Union[Frequency, str, None]) -> Optional[Frequency]:
    """Resolve a stored frequency value, including legacy labels. None if unknown."""
    if isinstance(value, Frequency):
        return value
    if value is None:
        return None
    try:
        return Frequency(value)
    except ValueError:
        return LEGACY_FREQUENCY_ALIASES.get(value)


def monthly_equivalent(amount: float, frequency: Union[Frequency, str, None]) -> float:
    """Monthly-equivalent cost of an amount billed at the given frequency.

    Unknown frequencies pass the amount through unchanged.
    """
    parsed = parse_frequency(frequency)

    if parsed is Frequency.MONTHLY:
        return amount
    elif parsed is Frequency.QUARTERLY:
        return amount / 3
    elif parsed is Frequency.SEMI_ANNUALLY:
        return amount / 6
    elif parsed is Frequency.YEARLY:
        return amount / 12
    elif parsed is Frequency.ONE_TIME:
        return amount / 12
    else:
        logger.warning(f"Unknown frequency {frequency!r}, using amount {amount} as monthly value")
        return amount
