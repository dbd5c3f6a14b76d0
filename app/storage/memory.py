"""In-memory customer and transaction provider.

Customers are keyed by ID and transactions are kept per customer in
insertion order, so range lookups return a stable order. Seeded from the
JSON files in data/ at startup; all data is lost on restart.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional

from app.models import Customer, Transaction


class MemoryStore:
    """Dict-backed implementation of the rewards provider."""

    def __init__(self) -> None:
        self._customers: Dict[str, Customer] = {}
        # Transactions indexed by customer ID, in insertion order
        self._transactions: Dict[str, List[Transaction]] = {}

    def add_customer(self, customer: Customer) -> None:
        """Store a customer, replacing any existing one with the same ID."""
        self._customers[customer.customer_id] = customer

    def add_transaction(self, tx: Transaction) -> None:
        """Append a transaction to its customer's history."""
        self._transactions.setdefault(tx.customer_id, []).append(tx)

    def load_seed(
        self,
        customers: Iterable[Customer],
        transactions: Iterable[Transaction],
    ) -> None:
        for customer in customers:
            self.add_customer(customer)
        for tx in transactions:
            self.add_transaction(tx)

    def get_customers(self) -> List[Customer]:
        return list(self._customers.values())

    def find_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def find_transactions(
        self,
        customer_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Transaction]:
        """Return a customer's transactions with start_date <= date <= end_date.

        Either bound may be omitted for an open-ended range.
        """
        results: List[Transaction] = []
        for tx in self._transactions.get(customer_id, []):
            if start_date is not None and tx.date < start_date:
                continue
            if end_date is not None and tx.date > end_date:
                continue
            results.append(tx)
        return results
