"""Customer and transaction history lookup endpoints."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Query, Request

from app.errors import NotFoundError
from app.models import Customer, Transaction
from app.storage.memory import MemoryStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


def _require_customer(store: MemoryStore, customer_id: str) -> Customer:
    customer = store.find_customer_by_id(customer_id)
    if customer is None:
        raise NotFoundError(f"Customer not found: {customer_id}")
    return customer


@router.get("/customers", response_model=List[Customer])
async def list_customers(request: Request) -> List[Customer]:
    """List every known customer."""
    return _get_store(request).get_customers()


@router.get("/customers/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, request: Request) -> Customer:
    return _require_customer(_get_store(request), customer_id)


@router.get(
    "/customers/{customer_id}/transactions",
    response_model=List[Transaction],
)
async def get_customer_transactions(
    customer_id: str,
    request: Request,
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
) -> List[Transaction]:
    """Get a customer's raw transactions, optionally limited to a date range.

    Filters:
      - start_date: transactions dated on or after this day
      - end_date: transactions dated on or before this day
    """
    store = _get_store(request)
    _require_customer(store, customer_id)
    return store.find_transactions(customer_id, start_date, end_date)
