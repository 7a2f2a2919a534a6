"""Budget model: a spending ceiling for one expense category."""

from dataclasses import dataclass
from decimal import Decimal

WARNING_THRESHOLD = Decimal("70")
OVER_THRESHOLD = Decimal("90")


@dataclass
class Budget:
    """Represents a category budget.

    Attributes:
        id: Unique identifier, assigned at creation.
        category: Expense category this budget tracks (one budget per category).
        amount: The budget ceiling.
        spent: Running total of expenses recorded against the category.
    """

    id: str
    category: str
    amount: Decimal
    spent: Decimal = Decimal("0")

    @property
    def remaining(self) -> Decimal:
        return self.amount - self.spent

    @property
    def percent_used(self) -> Decimal:
        """Share of the ceiling already spent, in percent (not capped)."""
        if self.amount == 0:
            return Decimal("0")
        return self.spent / self.amount * 100

    @property
    def progress(self) -> Decimal:
        """Percent used, clamped to 0..100 for progress bars."""
        return max(Decimal("0"), min(self.percent_used, Decimal("100")))

    @property
    def status(self) -> str:
        """'ok' below 70%, 'warning' below 90%, 'over' otherwise."""
        percent = self.percent_used
        if percent < WARNING_THRESHOLD:
            return "ok"
        if percent < OVER_THRESHOLD:
            return "warning"
        return "over"

    def to_dict(self) -> dict:
        """Convert budget to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "category": self.category,
            "amount": str(self.amount),
            "spent": str(self.spent),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Budget":
        return cls(
            id=str(data["id"]),
            category=data["category"],
            amount=Decimal(str(data["amount"])),
            spent=Decimal(str(data.get("spent", 0))),
        )
