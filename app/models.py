"""Pydantic models for the customer rewards API."""

import uuid
import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Customer(BaseModel):
    """A customer as returned by the data provider."""
    model_config = ConfigDict(frozen=True)

    customer_id: str
    name: str
    email: str


class Transaction(BaseModel):
    """A purchase made by a customer.

    The amount is not sign-checked here; the calculator rejects negatives.
    """
    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    customer_id: str
    amount: float
    date: datetime.date


class TransactionPoints(BaseModel):
    """Points earned by a single transaction."""
    model_config = ConfigDict(frozen=True)

    transaction_id: str
    date: datetime.date
    amount: float
    points: int


class RewardSummary(BaseModel):
    """Reward points for one customer over a date range."""
    model_config = ConfigDict(frozen=True)

    customer_id: str
    customer_name: str
    customer_email: str
    points_per_month: dict[str, int]  # month key -> summed points
    total_points: int
    transactions: list[TransactionPoints]  # same order as the provider returned


class RewardsConfig(BaseModel):
    """Tunable settings for the points rule and the service.

    Replaced wholesale on update, never mutated in place.
    """
    model_config = ConfigDict(frozen=True)

    upper_threshold: float = Field(100, ge=0, allow_inf_nan=False)
    upper_multiplier: int = Field(2, ge=0)
    lower_threshold: float = Field(50, ge=0, allow_inf_nan=False)
    lower_multiplier: int = Field(1, ge=0)
    month_key_format: Literal["YYYY-MM", "MONTH-YYYY"] = "YYYY-MM"
    truncate_amount: bool = False  # drop cents before applying the rule
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @model_validator(mode="after")
    def check_tier_order(self) -> "RewardsConfig":
        if self.lower_threshold > self.upper_threshold:
            raise ValueError("lower_threshold cannot exceed upper_threshold")
        return self
