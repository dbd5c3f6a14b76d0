"""Reward calculator.

Validates the request in a fixed order (first failure wins):
  1. Customer ID present and not blank
  2. Start and end dates present
  3. Start date not after end date
  4. Neither date in the future
  5. Customer exists

Then folds the customer's transactions into per-transaction points,
per-month buckets and a grand total. A negative amount anywhere in the
list rejects the whole request, as does a NaN or infinite amount.
"""

import math
from datetime import date
from typing import Callable, Dict, List, Optional

from app.errors import InvalidInputError, NotFoundError
from app.models import (
    Customer,
    RewardsConfig,
    RewardSummary,
    TransactionPoints,
)
from app.rewards.points import calculate_points, month_key
from app.rewards.provider import RewardsProvider


class RewardCalculator:
    """Computes reward summaries from provider data."""

    def __init__(
        self,
        provider: RewardsProvider,
        config: Optional[RewardsConfig] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.provider = provider
        self.config = config or RewardsConfig()
        self.clock = clock

    def compute_rewards(
        self,
        customer_id: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> RewardSummary:
        """Compute the reward summary for a customer over [start_date, end_date].

        Raises InvalidInputError for bad parameters or negative amounts and
        NotFoundError when the customer does not exist.
        """
        customer = self._validate(customer_id, start_date, end_date)
        config = self.config

        transactions = self.provider.find_transactions(
            customer.customer_id, start_date, end_date
        )

        points_per_month: Dict[str, int] = {}
        enriched: List[TransactionPoints] = []
        total = 0

        for tx in transactions:
            if not math.isfinite(tx.amount):
                raise InvalidInputError(
                    f"Transaction amount must be a finite number: {tx.transaction_id}"
                )
            if tx.amount < 0:
                raise InvalidInputError(
                    f"Transaction amount cannot be negative: {tx.transaction_id}"
                )

            points = calculate_points(tx.amount, config)
            key = month_key(tx.date, config.month_key_format)
            points_per_month[key] = points_per_month.get(key, 0) + points

            enriched.append(
                TransactionPoints(
                    transaction_id=tx.transaction_id,
                    date=tx.date,
                    amount=tx.amount,
                    points=points,
                )
            )
            total += points

        return RewardSummary(
            customer_id=customer.customer_id,
            customer_name=customer.name,
            customer_email=customer.email,
            points_per_month=points_per_month,
            total_points=total,
            transactions=enriched,
        )

    def _validate(
        self,
        customer_id: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> Customer:
        if customer_id is None or not customer_id.strip():
            raise InvalidInputError("Customer ID cannot be null or empty")
        if start_date is None:
            raise InvalidInputError("Start date cannot be null")
        if end_date is None:
            raise InvalidInputError("End date cannot be null")
        if start_date > end_date:
            raise InvalidInputError("Start date cannot be after end date")

        today = self.clock()
        if start_date > today or end_date > today:
            raise InvalidInputError("Dates cannot be in the future")

        customer_id = customer_id.strip()
        customer = self.provider.find_customer_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer not found: {customer_id}")
        return customer
