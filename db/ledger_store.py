"""Ledger store: load and save the ledger snapshot under one storage key."""

import json
from decimal import Decimal
from models.ledger import Ledger
from logger import get_logger

logger = get_logger()


class LedgerStore:
    """Persists the whole ledger as one JSON document.

    Read and write failures never propagate: a failed read yields an empty
    ledger and a failed write is dropped, leaving the in-memory ledger as the
    source of truth.

    Args:
        storage: Key-value storage with get(key) and set(key, value).
        key: Storage key the document lives under.
    """

    def __init__(self, storage, key: str):
        self.storage = storage
        self.key = key

    def load(self) -> Ledger:
        """Load the ledger, falling back to an empty one.

        Returns:
            The stored Ledger, or an empty Ledger if absent or unreadable.
        """
        try:
            raw = self.storage.get(self.key)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading data from storage: {e}")
            return Ledger.empty()

        if raw is None:
            logger.debug(f"No stored ledger under '{self.key}', starting empty")
            return Ledger.empty()

        try:
            ledger = Ledger.from_dict(json.loads(raw, parse_float=Decimal))
        except (TypeError, KeyError, ValueError, ArithmeticError) as e:
            logger.error(f"Error loading data from storage: {e}")
            return Ledger.empty()

        logger.debug(
            f"Loaded {len(ledger.transactions)} transactions and "
            f"{len(ledger.budgets)} budgets"
        )
        return ledger

    def save(self, ledger: Ledger) -> bool:
        """Write a full snapshot of the ledger.

        Args:
            ledger: Ledger to persist.

        Returns:
            True if the snapshot was written, False if the write was dropped.
        """
        try:
            self.storage.set(self.key, json.dumps(ledger.to_dict()))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving data to storage: {e}")
            return False
        return True
