"""Tests for the in-memory provider."""

from datetime import date

from app.storage.memory import MemoryStore
from tests.conftest import make_customer, make_transaction


class TestMemoryStoreCustomers:
    def test_find_existing(self, store):
        customer = store.find_customer_by_id("C1")
        assert customer is not None
        assert customer.name == "John Carter"

    def test_find_missing_returns_none(self, store):
        assert store.find_customer_by_id("C99") is None

    def test_ids_are_exact_match(self, store):
        assert store.find_customer_by_id("c1") is None

    def test_add_replaces_same_id(self, store):
        store.add_customer(make_customer(name="Johnny Carter"))
        assert store.find_customer_by_id("C1").name == "Johnny Carter"
        assert len(store.get_customers()) == 1

    def test_get_customers(self, store):
        store.add_customer(make_customer(customer_id="C2", name="Priya Nair"))
        ids = [c.customer_id for c in store.get_customers()]
        assert ids == ["C1", "C2"]


class TestMemoryStoreTransactions:
    def test_insertion_order_preserved(self, store):
        store.add_transaction(make_transaction(day="2024-02-01", tx_id="b"))
        store.add_transaction(make_transaction(day="2024-01-01", tx_id="a"))
        results = store.find_transactions("C1", date(2024, 1, 1), date(2024, 12, 31))
        assert [t.transaction_id for t in results] == ["b", "a"]

    def test_range_is_inclusive(self, store):
        store.add_transaction(make_transaction(day="2024-01-01", tx_id="first"))
        store.add_transaction(make_transaction(day="2024-01-31", tx_id="last"))
        results = store.find_transactions("C1", date(2024, 1, 1), date(2024, 1, 31))
        assert len(results) == 2

    def test_outside_range_excluded(self, store):
        store.add_transaction(make_transaction(day="2023-12-31", tx_id="before"))
        store.add_transaction(make_transaction(day="2024-01-15", tx_id="inside"))
        store.add_transaction(make_transaction(day="2024-02-01", tx_id="after"))
        results = store.find_transactions("C1", date(2024, 1, 1), date(2024, 1, 31))
        assert [t.transaction_id for t in results] == ["inside"]

    def test_open_ended_range(self, store):
        store.add_transaction(make_transaction(day="2020-01-01"))
        store.add_transaction(make_transaction(day="2024-01-01"))
        assert len(store.find_transactions("C1")) == 2
        assert len(store.find_transactions("C1", start_date=date(2023, 1, 1))) == 1
        assert len(store.find_transactions("C1", end_date=date(2023, 1, 1))) == 1

    def test_customers_isolated(self, store):
        store.add_transaction(make_transaction(customer_id="C1"))
        store.add_transaction(make_transaction(customer_id="C2"))
        assert len(store.find_transactions("C1")) == 1
        assert len(store.find_transactions("C2")) == 1

    def test_unknown_customer_empty(self, store):
        assert store.find_transactions("Nobody") == []

    def test_generated_transaction_ids_unique(self):
        first = make_transaction()
        second = make_transaction()
        assert first.transaction_id
        assert first.transaction_id != second.transaction_id


class TestMemoryStoreSeed:
    def test_load_seed(self):
        store = MemoryStore()
        store.load_seed(
            [make_customer("C1"), make_customer("C2", name="Priya Nair")],
            [
                make_transaction(customer_id="C1"),
                make_transaction(customer_id="C2"),
                make_transaction(customer_id="C2"),
            ],
        )
        assert len(store.get_customers()) == 2
        assert len(store.find_transactions("C2")) == 2
