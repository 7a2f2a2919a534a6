"""Storage manager for the local key-value store and its path management."""

import json
import os
import tempfile
from typing import Optional
from config import Config


class StorageManager:
    """File-backed key-value store.

    The file holds a single JSON object mapping keys to string values, the
    same shape as browser local storage.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the storage manager.

        Args:
            config: Config object containing storage configuration.
        """
        self.config = config

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored string, or None if the store or key does not exist.

        Raises:
            OSError: If the store file cannot be read.
            ValueError: If the store file is not a valid JSON object.
        """
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing the store file atomically.

        Args:
            key: Storage key.
            value: String value to store.

        Raises:
            OSError: If the store file cannot be written.
        """
        store_path = self.config.store_path
        store_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            items = self._read_all()
        except (OSError, ValueError):
            items = {}
        items[key] = value

        fd, tmp_name = tempfile.mkstemp(
            dir=store_path.parent, prefix=f".{store_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_name, store_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get_store_path(self):
        """Get the current store path.

        Returns:
            Path: Path to the store file.
        """
        return self.config.store_path

    def _read_all(self) -> dict:
        store_path = self.config.store_path
        if not store_path.exists():
            return {}
        with open(store_path, "r", encoding="utf-8") as f:
            items = json.load(f)
        if not isinstance(items, dict):
            raise ValueError(f"Store file {store_path} does not hold a JSON object")
        return items
