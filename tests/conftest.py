"""Shared fixtures for the test suite."""

import pytest
from datetime import date
from fastapi.testclient import TestClient

from app.main import app
from app.models import Customer, RewardsConfig, Transaction
from app.rewards.calculator import RewardCalculator
from app.storage.memory import MemoryStore


TODAY = date(2024, 6, 30)


@pytest.fixture
def config():
    return RewardsConfig()


@pytest.fixture
def store():
    store = MemoryStore()
    store.add_customer(make_customer())
    return store


@pytest.fixture
def calculator(store, config):
    return RewardCalculator(provider=store, config=config, clock=lambda: TODAY)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def make_customer(
    customer_id="C1",
    name="John Carter",
    email="john.carter@example.com",
) -> Customer:
    return Customer(customer_id=customer_id, name=name, email=email)


def make_transaction(
    amount=120.0,
    day="2024-01-10",
    customer_id="C1",
    tx_id=None,
) -> Transaction:
    fields = dict(
        customer_id=customer_id,
        amount=amount,
        date=date.fromisoformat(day),
    )
    if tx_id is not None:
        fields["transaction_id"] = tx_id
    return Transaction(**fields)
