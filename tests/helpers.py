"""Helper utilities for tests."""

import itertools
from datetime import date
from decimal import Decimal

from models.transaction import Transaction, TransactionDraft


class MemoryStorage:
    """Key-value storage kept in a dict.

    Args:
        items: Optional initial key/value pairs.
        fail_reads: If True, get() raises OSError.
        fail_writes: If True, set() raises OSError.
    """

    def __init__(self, items=None, fail_reads=False, fail_writes=False):
        self.items = dict(items or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = 0

    def get(self, key):
        if self.fail_reads:
            raise OSError("storage unavailable")
        return self.items.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        self.items[key] = value
        self.writes += 1


def sequential_ids(prefix="id"):
    """Return an id factory producing prefix-1, prefix-2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def make_draft(amount, type="expense", category="Food", on="2024-03-05", description=""):
    """Build a TransactionDraft from short literal values."""
    return TransactionDraft(
        amount=Decimal(str(amount)),
        type=type,
        category=category,
        description=description,
        date=date.fromisoformat(on),
    )


def make_transaction(id, amount, type="expense", category="Food", on="2024-03-05"):
    """Build a stored Transaction directly, bypassing the service."""
    return Transaction(
        id=id,
        amount=Decimal(str(amount)),
        type=type,
        category=category,
        description="",
        date=date.fromisoformat(on),
    )
