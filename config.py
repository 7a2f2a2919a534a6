"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

DEFAULT_STORAGE_KEY = "finance_tracker_data"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    store_filename: str
    storage_key: str
    log_level: str
    log_dir: Path
    currency_symbol: str

    @property
    def store_path(self) -> Path:
        """Get the full store path (data_dir/filename)."""
        return self.data_dir / self.store_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "tally"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "store",
            store_filename="tally.json",
            storage_key=DEFAULT_STORAGE_KEY,
            log_level="INFO",
            log_dir=base_dir / "logs",
            currency_symbol="₹",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return config_from_dict(data)


def config_from_dict(data: dict) -> Config:
    """Build a Config from parsed TOML data, filling in defaults.

    Args:
        data: Parsed TOML document.

    Returns:
        Config object.
    """
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "tally"))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir / "store"))
    store_filename = storage_config.get("filename", "tally.json")
    storage_key = storage_config.get("key", DEFAULT_STORAGE_KEY)

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    display_config = data.get("display", {})
    currency_symbol = display_config.get("currency_symbol", "₹")

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        store_filename=store_filename,
        storage_key=storage_key,
        log_level=log_level,
        log_dir=log_dir,
        currency_symbol=currency_symbol,
    )


def config_to_dict(config: Config) -> dict:
    """Convert a Config to its TOML structure."""
    return {
        "base_dir": str(config.base_dir),
        "storage": {
            "data_dir": str(config.data_dir),
            "filename": config.store_filename,
            "key": config.storage_key,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "display": {
            "currency_symbol": config.currency_symbol,
        },
    }


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config_to_dict(config), f)
