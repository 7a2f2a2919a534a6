"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from tests.helpers import MemoryStorage, sequential_ids


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary store.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        data_dir=tmp_path / "tally" / "store",
        store_filename="test.json",
        storage_key="finance_tracker_data",
        log_level="DEBUG",
        log_dir=tmp_path / "tally" / "logs",
        currency_symbol="₹",
    )


@pytest.fixture
def memory_storage():
    """Create an empty in-memory key-value storage.

    Returns:
        MemoryStorage: Storage that keeps values in a dict.
    """
    return MemoryStorage()


@pytest.fixture
def services(test_config, memory_storage):
    """Create a Services container backed by in-memory storage.

    Ids are generated sequentially ("id-1", "id-2", ...) so tests can
    predict them.

    Args:
        test_config: Test configuration fixture.
        memory_storage: In-memory storage fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, storage=memory_storage, id_factory=sequential_ids())
