"""Ledger service: transaction and budget bookkeeping."""

import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional
from models.budget import Budget
from models.category import DEFAULT_EXPENSE_CATEGORIES
from models.ledger import Ledger
from models.transaction import Transaction, TransactionDraft, TRANSACTION_TYPES
from services.errors import BudgetExistsError, ValidationError
from logger import get_logger

logger = get_logger()


def new_id() -> str:
    """Default id generator."""
    return str(uuid.uuid4())


def _positive_amount(amount) -> Decimal:
    """Coerce an amount to Decimal and require it to be positive.

    Raises:
        ValidationError: If the amount is missing, not a number, or not positive.
    """
    if amount is None or isinstance(amount, bool):
        raise ValidationError("Please enter a valid amount")
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"Please enter a valid amount (got {amount!r})")
    if not value.is_finite() or value <= 0:
        raise ValidationError("Please enter a valid amount")
    return value


class LedgerService:
    """Service owning the in-memory ledger.

    Every mutation completes before returning and replaces ``self.ledger``.
    Persisting the result is the caller's job.

    Args:
        ledger: Initial ledger state, usually loaded from the store.
        id_factory: Callable returning a fresh unique string id.
    """

    def __init__(self, ledger: Ledger, id_factory: Callable[[], str] = new_id):
        self.ledger = ledger
        self.id_factory = id_factory

    def transactions(self) -> List[Transaction]:
        """Get all transactions, most recently added first."""
        return list(self.ledger.transactions)

    def budgets(self) -> List[Budget]:
        """Get all budgets in creation order."""
        return list(self.ledger.budgets)

    def find_transaction(self, transaction_id: str) -> Optional[Transaction]:
        for transaction in self.ledger.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def find_budget(self, budget_id: str) -> Optional[Budget]:
        for budget in self.ledger.budgets:
            if budget.id == budget_id:
                return budget
        return None

    def find_budget_by_category(self, category: str) -> Optional[Budget]:
        for budget in self.ledger.budgets:
            if budget.category == category:
                return budget
        return None

    def available_budget_categories(self) -> List[str]:
        """Get default expense categories that do not have a budget yet."""
        taken = {budget.category for budget in self.ledger.budgets}
        return [c for c in DEFAULT_EXPENSE_CATEGORIES if c not in taken]

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        """Record a new transaction.

        Expenses are added to the ``spent`` total of the budget for their
        category, if one exists. Budgets are never created implicitly.

        Args:
            draft: Transaction fields without an id.

        Returns:
            The created Transaction.

        Raises:
            ValidationError: If the draft is invalid. The ledger is unchanged.
        """
        amount = _positive_amount(draft.amount)
        if draft.type not in TRANSACTION_TYPES:
            raise ValidationError(
                f"Transaction type must be one of: {', '.join(TRANSACTION_TYPES)}"
            )
        if not draft.category or not draft.category.strip():
            raise ValidationError("Category cannot be empty")
        if not isinstance(draft.date, date):
            raise ValidationError("Please enter a valid date")
        transaction_date = (
            draft.date.date() if isinstance(draft.date, datetime) else draft.date
        )

        transaction = Transaction(
            id=self.id_factory(),
            amount=amount,
            type=draft.type,
            category=draft.category,
            description=draft.description or "",
            date=transaction_date,
        )

        budgets = self.ledger.budgets
        if transaction.is_expense:
            budgets = self._adjust_spent(
                budgets, transaction.category, transaction.amount
            )

        self.ledger = Ledger(
            transactions=[transaction] + self.ledger.transactions,
            budgets=budgets,
        )
        logger.debug(
            f"Added {transaction.type} {transaction.id} "
            f"({transaction.category}, {transaction.amount})"
        )
        return transaction

    def delete_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Remove a transaction, reversing its effect on budgets.

        Deleting an id that does not exist is a no-op.

        Args:
            transaction_id: Id of the transaction to delete.

        Returns:
            The removed Transaction, or None if it was not found.
        """
        transaction = self.find_transaction(transaction_id)
        if transaction is None:
            logger.debug(f"Transaction {transaction_id} not found, nothing to delete")
            return None

        budgets = self.ledger.budgets
        if transaction.is_expense:
            # No clamping: an exact reversal of the add.
            budgets = self._adjust_spent(
                budgets, transaction.category, -transaction.amount
            )

        self.ledger = Ledger(
            transactions=[
                t for t in self.ledger.transactions if t.id != transaction_id
            ],
            budgets=budgets,
        )
        logger.debug(f"Deleted transaction {transaction_id}")
        return transaction

    def add_budget(self, category: str, amount) -> Budget:
        """Create a budget for a category with nothing spent.

        Args:
            category: Expense category to budget.
            amount: Budget ceiling, must be positive.

        Returns:
            The created Budget.

        Raises:
            ValidationError: If the category is empty or the amount invalid.
            BudgetExistsError: If the category already has a budget.
        """
        if not category or not category.strip():
            raise ValidationError("Category cannot be empty")
        value = _positive_amount(amount)
        if self.find_budget_by_category(category) is not None:
            raise BudgetExistsError(category)

        budget = Budget(
            id=self.id_factory(), category=category, amount=value, spent=Decimal("0")
        )
        self.ledger = Ledger(
            transactions=self.ledger.transactions,
            budgets=self.ledger.budgets + [budget],
        )
        logger.debug(f"Added budget {budget.id} for {category} ({value})")
        return budget

    def delete_budget(self, budget_id: str) -> Optional[Budget]:
        """Remove a budget. Transactions in its category are kept.

        Args:
            budget_id: Id of the budget to delete.

        Returns:
            The removed Budget, or None if it was not found.
        """
        budget = self.find_budget(budget_id)
        if budget is None:
            logger.debug(f"Budget {budget_id} not found, nothing to delete")
            return None

        self.ledger = Ledger(
            transactions=self.ledger.transactions,
            budgets=[b for b in self.ledger.budgets if b.id != budget_id],
        )
        logger.debug(f"Deleted budget {budget_id}")
        return budget

    @staticmethod
    def _adjust_spent(
        budgets: List[Budget], category: str, delta: Decimal
    ) -> List[Budget]:
        """Return budgets with ``delta`` applied to the one matching category."""
        return [
            Budget(
                id=b.id, category=b.category, amount=b.amount, spent=b.spent + delta
            )
            if b.category == category
            else b
            for b in budgets
        ]
