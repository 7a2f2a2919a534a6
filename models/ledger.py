"""Ledger model: the whole persisted document."""

from dataclasses import dataclass, field
from typing import List
from models.budget import Budget
from models.transaction import Transaction


@dataclass
class Ledger:
    """Combined collection of transactions and budgets.

    Transactions are kept newest-first in insertion order; budgets in
    creation order.
    """

    transactions: List[Transaction] = field(default_factory=list)
    budgets: List[Budget] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Ledger":
        return cls(transactions=[], budgets=[])

    def to_dict(self) -> dict:
        return {
            "transactions": [t.to_dict() for t in self.transactions],
            "budgets": [b.to_dict() for b in self.budgets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Ledger":
        """Build a ledger from the stored document.

        Raises:
            TypeError, KeyError, ValueError: If the document is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        return cls(
            transactions=[
                Transaction.from_dict(item) for item in data.get("transactions", [])
            ],
            budgets=[Budget.from_dict(item) for item in data.get("budgets", [])],
        )
