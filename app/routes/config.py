"""Points rule settings, readable and replaceable at runtime."""

import logging

from fastapi import APIRouter, Request

from app.models import RewardsConfig

router = APIRouter(prefix="/api")


@router.get("/config", response_model=RewardsConfig)
async def get_config(request: Request) -> RewardsConfig:
    return request.app.state.config


@router.put("/config", response_model=RewardsConfig)
async def update_config(
    new_config: RewardsConfig,
    request: Request,
) -> RewardsConfig:
    """Swap in new settings; the next reward request uses them."""
    request.app.state.config = new_config
    request.app.state.calculator.config = new_config
    logging.getLogger().setLevel(new_config.log_level)
    return new_config
