"""Configuration management for OnTask."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

ONTASK_HOME = Path(os.environ.get("ONTASK_HOME", Path.home() / "ontask"))
CONFIG_FILE = ONTASK_HOME / "config" / "ontask.conf"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """OnTask configuration."""

    vault_dir: str = ""
    timezone: str = ""
    active_strategies: list[str] = field(default_factory=lambda: ["streams"])
    default_limit: int = 10
    # Daily notes folder; empty means use the vault's own setting
    daily_notes_folder: str = ""
    # Folder strategy settings
    folder_path: str = ""
    folder_recursive: bool = True
    # Streams plugin data file; empty means <vault>/.obsidian/plugins/streams/data.json
    streams_data_file: str = ""

    @property
    def vault_path(self) -> Path:
        if self.vault_dir:
            return Path(self.vault_dir).expanduser()
        return ONTASK_HOME / "vault"


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value}")
    return default


def _strip_value(value: str) -> str:
    """Remove surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ontask.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "vault_dir":
                config.vault_dir = value
            case "timezone":
                config.timezone = value
            case "active_strategies":
                config.active_strategies = [s.strip() for s in value.split(",") if s.strip()]
            case "default_limit":
                try:
                    config.default_limit = int(value)
                except ValueError:
                    logger.warning(f"Invalid DEFAULT_LIMIT: {value}")
            case "daily_notes_folder":
                config.daily_notes_folder = value
            case "folder_path":
                config.folder_path = value
            case "folder_recursive":
                config.folder_recursive = _parse_bool(key, value, config.folder_recursive)
            case "streams_data_file":
                config.streams_data_file = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
