"""Data provider contract consumed by the reward calculator."""

from datetime import date
from typing import List, Optional, Protocol

from app.models import Customer, Transaction


class RewardsProvider(Protocol):
    """Lookup of customers and their transactions.

    `find_transactions` is trusted to apply the inclusive date filter and
    to return transactions in a stable order.
    """

    def find_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        ...

    def find_transactions(
        self,
        customer_id: str,
        start_date: date,
        end_date: date,
    ) -> List[Transaction]:
        ...
