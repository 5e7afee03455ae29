"""Configuration management for Passbook.

Reads configuration from ~/.config/passbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    accounts_dir: Path
    history_dir: Path
    log_level: str
    log_dir: Path
    default_owner: str = ""

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "passbook"
        return cls(
            base_dir=base_dir,
            accounts_dir=base_dir / "accounts",
            history_dir=base_dir / "history",
            log_level="INFO",
            log_dir=base_dir / "logs",
            default_owner="",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "passbook.toml"


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

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "passbook"))

    storage_config = data.get("storage", {})
    accounts_dir = Path(storage_config.get("accounts_dir", base_dir / "accounts"))
    history_dir = Path(storage_config.get("history_dir", base_dir / "history"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    session_config = data.get("session", {})
    default_owner = session_config.get("default_owner", "")

    return Config(
        base_dir=base_dir,
        accounts_dir=accounts_dir,
        history_dir=history_dir,
        log_level=log_level,
        log_dir=log_dir,
        default_owner=default_owner,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "storage": {
            "accounts_dir": str(config.accounts_dir),
            "history_dir": str(config.history_dir),
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "session": {
            "default_owner": config.default_owner,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
