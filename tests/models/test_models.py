from decimal import Decimal

import pytest

from models.budget import Budget
from models.category import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    default_categories,
)
from models.ledger import Ledger
from models.transaction import Transaction
from tests.helpers import make_transaction


class TestBudget:
    """Tests for Budget derived values."""

    def make(self, amount, spent):
        return Budget(
            id="b1", category="Food", amount=Decimal(amount), spent=Decimal(spent)
        )

    def test_remaining(self):
        assert self.make("2000", "500").remaining == Decimal("1500")

    def test_percent_used_not_capped(self):
        assert self.make("1000", "1500").percent_used == Decimal("150")

    def test_progress_capped(self):
        assert self.make("1000", "1500").progress == Decimal("100")
        assert self.make("1000", "-10").progress == Decimal("0")

    @pytest.mark.parametrize(
        "spent, status",
        [("0", "ok"), ("699", "ok"), ("700", "warning"), ("899", "warning"), ("900", "over"), ("1200", "over")],
    )
    def test_status_thresholds(self, spent, status):
        assert self.make("1000", spent).status == status

    def test_defaults_to_unspent(self):
        budget = Budget(id="b1", category="Food", amount=Decimal("100"))

        assert budget.spent == 0


class TestTransaction:
    """Tests for Transaction serialization."""

    def record(self, **overrides):
        data = {
            "id": "t1",
            "amount": "10.25",
            "type": "expense",
            "category": "Food",
            "date": "2024-03-05",
        }
        data.update(overrides)
        return data

    def test_amount_written_as_decimal_string(self):
        transaction = make_transaction("t1", "0.10")

        assert transaction.to_dict()["amount"] == "0.10"

    def test_accepts_numeric_amount(self):
        transaction = Transaction.from_dict(self.record(amount=42))

        assert transaction.amount == Decimal("42")

    def test_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            Transaction.from_dict(self.record(type="transfer"))

    @pytest.mark.parametrize("amount", ["0", "-5", "NaN", "Infinity"])
    def test_rejects_non_positive_amount(self, amount):
        with pytest.raises(ValueError):
            Transaction.from_dict(self.record(amount=amount))


class TestLedger:
    """Tests for Ledger serialization."""

    def test_empty(self):
        assert Ledger.empty().to_dict() == {"transactions": [], "budgets": []}

    def test_from_dict_round_trip(self):
        ledger = Ledger(
            transactions=[make_transaction("t1", "10.25")],
            budgets=[Budget(id="b1", category="Food", amount=Decimal("100"))],
        )

        assert Ledger.from_dict(ledger.to_dict()) == ledger

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(TypeError):
            Ledger.from_dict("nope")

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            Ledger.from_dict({"transactions": [{"id": "t1"}]})


class TestDefaultCategories:
    def test_by_type(self):
        assert default_categories("income") == DEFAULT_INCOME_CATEGORIES
        assert default_categories("expense") == DEFAULT_EXPENSE_CATEGORIES

    def test_returns_copy(self):
        categories = default_categories("expense")
        categories.append("Pets")

        assert "Pets" not in DEFAULT_EXPENSE_CATEGORIES
