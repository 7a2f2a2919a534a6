"""Default transaction categories offered when recording entries."""

DEFAULT_INCOME_CATEGORIES = [
    "Salary",
    "Business",
    "Investments",
    "Rental",
    "Dividend",
    "Gift",
    "Interest",
    "Other",
]

DEFAULT_EXPENSE_CATEGORIES = [
    "Food",
    "Groceries",
    "Transportation",
    "Utilities",
    "Rent",
    "Entertainment",
    "Shopping",
    "Health",
    "Education",
    "Insurance",
    "EMI",
    "Travel",
    "Other",
]


def default_categories(transaction_type: str) -> list:
    """Get the default category list for a transaction type."""
    if transaction_type == "income":
        return list(DEFAULT_INCOME_CATEGORIES)
    return list(DEFAULT_EXPENSE_CATEGORIES)
