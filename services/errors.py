"""Errors raised by ledger operations."""


class LedgerError(Exception):
    """Base class for rejected ledger operations."""


class ValidationError(LedgerError, ValueError):
    """Input failed validation; nothing was changed."""


class BudgetExistsError(LedgerError):
    """A budget for the category already exists."""

    def __init__(self, category: str):
        super().__init__(f"A budget for category '{category}' already exists")
        self.category = category
