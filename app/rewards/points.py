"""Tiered points rule and month-key derivation.

A purchase earns `upper_multiplier` points for every dollar above
`upper_threshold`, plus `lower_multiplier` points for every dollar between
`lower_threshold` and `upper_threshold`. With the defaults (2x over $100,
1x between $50 and $100) a $120 purchase earns 2*20 + 1*50 = 90 points.

Arithmetic is done in Decimal so that fractional amounts like 100.10 do not
pick up binary float error before the final floor.
"""

import datetime
import math
from decimal import Decimal

from app.models import RewardsConfig

_DEFAULT_CONFIG = RewardsConfig()

_MONTH_NAMES = (
    "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
    "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
)


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def calculate_points(amount: float, config: RewardsConfig = _DEFAULT_CONFIG) -> int:
    """Return the integer points earned by a non-negative amount.

    The result is floored after both tiers are summed. When
    `config.truncate_amount` is set the cents are dropped first instead.
    """
    value = _to_decimal(amount)
    if config.truncate_amount:
        value = Decimal(math.floor(value))

    upper = _to_decimal(config.upper_threshold)
    lower = _to_decimal(config.lower_threshold)

    over_upper = max(value - upper, Decimal(0))
    between = max(min(value, upper) - lower, Decimal(0))

    points = config.upper_multiplier * over_upper + config.lower_multiplier * between
    return math.floor(points)


def month_key(day: datetime.date, key_format: str = "YYYY-MM") -> str:
    """Build the grouping key for the calendar month containing `day`.

    "YYYY-MM"    -> "2024-01"
    "MONTH-YYYY" -> "JANUARY-2024"
    """
    if key_format == "YYYY-MM":
        return f"{day.year:04d}-{day.month:02d}"
    if key_format == "MONTH-YYYY":
        return f"{_MONTH_NAMES[day.month - 1]}-{day.year:04d}"
    raise ValueError(f"Unsupported month key format: {key_format}")
