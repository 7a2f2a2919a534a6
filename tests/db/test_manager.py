import json

import pytest

from db.manager import StorageManager


class TestStorageManager:
    """Tests for the file-backed key-value store."""

    def test_get_missing_file(self, test_config):
        """Test reading before anything was written returns None."""
        storage = StorageManager(test_config)

        assert storage.get("anything") is None

    def test_set_creates_file(self, test_config):
        storage = StorageManager(test_config)

        storage.set("key", "value")

        assert test_config.store_path.exists()
        assert storage.get("key") == "value"

    def test_set_keeps_other_keys(self, test_config):
        storage = StorageManager(test_config)

        storage.set("a", "1")
        storage.set("b", "2")
        storage.set("a", "3")

        with open(test_config.store_path, encoding="utf-8") as f:
            assert json.load(f) == {"a": "3", "b": "2"}

    def test_set_leaves_no_temp_files(self, test_config):
        storage = StorageManager(test_config)

        storage.set("key", "value")

        assert [p.name for p in test_config.data_dir.iterdir()] == ["test.json"]

    def test_set_replaces_corrupt_file(self, test_config):
        """Test a corrupt store file is overwritten by the next write."""
        test_config.data_dir.mkdir(parents=True)
        test_config.store_path.write_text("garbage", encoding="utf-8")
        storage = StorageManager(test_config)

        storage.set("key", "value")

        assert storage.get("key") == "value"

    def test_get_corrupt_file_raises(self, test_config):
        test_config.data_dir.mkdir(parents=True)
        test_config.store_path.write_text("[1, 2]", encoding="utf-8")
        storage = StorageManager(test_config)

        with pytest.raises(ValueError):
            storage.get("key")

    def test_unicode_round_trip(self, test_config):
        storage = StorageManager(test_config)

        storage.set("key", "₹ chai")

        assert storage.get("key") == "₹ chai"

    def test_get_store_path(self, test_config):
        assert StorageManager(test_config).get_store_path() == test_config.store_path
