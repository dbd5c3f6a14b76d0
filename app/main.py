"""Customer Rewards API.

Computes loyalty reward points from a customer's purchase transactions
over a date range, broken down by calendar month.

Run with:
    python3 -m uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import json
import logging
from pathlib import Path
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.errors import InvalidInputError, NotFoundError
from app.models import Customer, RewardsConfig, Transaction
from app.rewards.calculator import RewardCalculator
from app.routes import config, customers, rewards
from app.storage.memory import MemoryStore

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DATA_DIR = Path(__file__).parent.parent / "data"

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Customer Rewards API",
    description=(
        "Loyalty reward points per customer: 2 points for every dollar "
        "spent over $100 and 1 point for every dollar between $50 and $100, "
        "summed per month and in total."
    ),
    version="1.0.0",
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # basicConfig is a no-op once handlers exist, so set the level directly
    logging.getLogger().setLevel(level)


@app.on_event("startup")
async def startup() -> None:
    """Load seed data and configuration, then build the calculator."""

    # Load rewards settings (or use defaults)
    config_path = DATA_DIR / "rewards_config.json"
    if config_path.exists():
        with open(config_path, "r") as f:
            rewards_config = RewardsConfig(**json.load(f))
    else:
        rewards_config = RewardsConfig()

    _configure_logging(rewards_config.log_level)

    # Seed customers and their purchase history
    with open(DATA_DIR / "customers.json", "r") as f:
        seed_customers: List[Customer] = [Customer(**c) for c in json.load(f)]

    with open(DATA_DIR / "transactions.json", "r") as f:
        seed_transactions: List[Transaction] = [
            Transaction(**t) for t in json.load(f)
        ]

    store = MemoryStore()
    store.load_seed(seed_customers, seed_transactions)
    calculator = RewardCalculator(provider=store, config=rewards_config)

    logger.info(
        "Loaded %d customers and %d transactions",
        len(seed_customers),
        len(seed_transactions),
    )

    # Attach to app state for dependency injection in routes
    app.state.calculator = calculator
    app.state.store = store
    app.state.config = rewards_config


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning("Not found %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=404, content={"detail": exc.message})


# Mount all API routers
app.include_router(rewards.router)
app.include_router(customers.router)
app.include_router(config.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}
