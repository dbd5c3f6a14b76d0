"""Reward summary endpoint."""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, Request

from app.models import RewardSummary
from app.rewards.calculator import RewardCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _get_calculator(request: Request) -> RewardCalculator:
    """Retrieve the reward calculator from application state."""
    return request.app.state.calculator


@router.get("/rewards/{customer_id}", response_model=RewardSummary)
async def get_customer_rewards(
    customer_id: str,
    request: Request,
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
) -> RewardSummary:
    """Compute reward points for a customer between two dates (inclusive).

    Missing dates are passed through so the calculator reports them as
    invalid input (400) rather than FastAPI rejecting them with 422.
    """
    calculator = _get_calculator(request)
    summary = calculator.compute_rewards(customer_id, start_date, end_date)

    logger.info(
        "Reward summary generated | customer_id=%s | from=%s | to=%s "
        "| total_points=%d | monthly=%s",
        summary.customer_id,
        start_date,
        end_date,
        summary.total_points,
        summary.points_per_month,
    )
    return summary
