import tomllib
from pathlib import Path

import config
from config import Config, config_from_dict, config_to_dict, load_config


class TestConfig:
    """Tests for configuration loading."""

    def test_store_path(self, test_config):
        assert test_config.store_path == test_config.data_dir / "test.json"

    def test_from_dict_defaults(self, tmp_path):
        loaded = config_from_dict({"base_dir": str(tmp_path)})

        assert loaded.data_dir == tmp_path / "store"
        assert loaded.store_filename == "tally.json"
        assert loaded.storage_key == "finance_tracker_data"
        assert loaded.log_level == "INFO"
        assert loaded.log_dir == tmp_path / "logs"
        assert loaded.currency_symbol == "₹"

    def test_from_dict_overrides(self, tmp_path):
        loaded = config_from_dict(
            {
                "base_dir": str(tmp_path),
                "storage": {"filename": "other.json", "key": "k"},
                "logging": {"level": "DEBUG"},
                "display": {"currency_symbol": "$"},
            }
        )

        assert loaded.store_path == tmp_path / "store" / "other.json"
        assert loaded.storage_key == "k"
        assert loaded.log_level == "DEBUG"
        assert loaded.currency_symbol == "$"

    def test_to_dict_round_trip(self, test_config):
        assert config_from_dict(config_to_dict(test_config)) == test_config

    def test_load_creates_default_file(self, tmp_path, monkeypatch):
        """Test a missing config file is written with defaults."""
        config_path = tmp_path / ".config" / "tally.toml"
        monkeypatch.setattr(config, "get_config_path", lambda: config_path)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        loaded = load_config()

        assert loaded == Config.default()
        with open(config_path, "rb") as f:
            assert tomllib.load(f)["storage"]["key"] == "finance_tracker_data"

    def test_load_reads_existing_file(self, tmp_path, monkeypatch):
        config_path = tmp_path / "tally.toml"
        config_path.write_text(
            f'base_dir = "{tmp_path.as_posix()}"\n[logging]\nlevel = "WARNING"\n',
            encoding="utf-8",
        )
        monkeypatch.setattr(config, "get_config_path", lambda: config_path)

        loaded = load_config()

        assert loaded.base_dir == tmp_path
        assert loaded.log_level == "WARNING"
