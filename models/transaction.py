from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from dateutil.parser import isoparse

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)


@dataclass
class TransactionDraft:
    """User-entered transaction fields, before an id is assigned."""

    amount: Decimal
    type: str  # 'income' or 'expense'
    category: str
    date: date
    description: str = ""


@dataclass
class Transaction:
    id: str
    amount: Decimal  # always positive
    type: str  # 'income' or 'expense'
    category: str
    description: str
    date: date

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    def to_dict(self) -> dict:
        """Convert transaction to a JSON-serializable dictionary.

        The amount is written as a decimal string so it reloads exactly.
        """
        return {
            "id": self.id,
            "amount": str(self.amount),
            "type": self.type,
            "category": self.category,
            "description": self.description,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build a transaction from its stored dictionary form.

        Amounts may be decimal strings or plain JSON numbers.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the date cannot be parsed, the type is unknown or
                        the amount is not positive.
            decimal.InvalidOperation: If the amount is not a number.
        """
        amount = Decimal(str(data["amount"]))
        if not amount.is_finite() or amount <= 0:
            raise ValueError(f"Transaction {data['id']} has a non-positive amount")
        if data["type"] not in TRANSACTION_TYPES:
            raise ValueError(
                f"Transaction {data['id']} has unknown type {data['type']!r}"
            )

        return cls(
            id=str(data["id"]),
            amount=amount,
            type=data["type"],
            category=data["category"],
            description=data.get("description") or "",
            date=isoparse(data["date"]).date(),
        )
