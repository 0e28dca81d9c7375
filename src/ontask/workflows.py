"""Wiring from configuration to adapters, registry and service.

Shared by the CLI and by callers embedding the finder.
"""

from datetime import date
from pathlib import Path

from .adapters.clock import FixedClock, SystemClock
from .adapters.file_vault import FileVault
from .adapters.obsidian_daily_notes import ObsidianDailyNotes
from .adapters.streams_plugin import StreamsPluginProvider, default_data_file
from .config import Config
from .registry import StrategyRegistry, build_registry
from .service import CheckboxFinderService
from .strategies import FolderStrategyConfig


def get_vault(config: Config) -> FileVault:
    return FileVault(config.vault_path)


def get_clock(config: Config, as_of: date | None = None) -> FixedClock | SystemClock:
    """Pinned clock when a date is given, otherwise the wall clock."""
    if as_of is not None:
        return FixedClock(as_of)
    return SystemClock(config.timezone or None)


def get_stream_provider(config: Config) -> StreamsPluginProvider:
    if config.streams_data_file:
        return StreamsPluginProvider(Path(config.streams_data_file).expanduser())
    return StreamsPluginProvider(default_data_file(config.vault_path))


def get_folder_config(config: Config, folder_path: str | None = None,
                      recursive: bool | None = None) -> FolderStrategyConfig:
    """Folder strategy settings from config, with optional overrides."""
    descend = config.folder_recursive if recursive is None else recursive
    return FolderStrategyConfig(
        folder_path=folder_path if folder_path is not None else config.folder_path,
        recursive=descend,
        include_subfolders=descend,
    )


def get_registry(
    config: Config,
    as_of: date | None = None,
    folder_config: FolderStrategyConfig | None = None,
) -> StrategyRegistry:
    """Registry with the built-in strategies wired to the configured vault."""
    return build_registry(
        store=get_vault(config),
        daily_notes=ObsidianDailyNotes(config.vault_path, config.daily_notes_folder),
        stream_provider=get_stream_provider(config),
        clock=get_clock(config, as_of),
        folder_config=folder_config or get_folder_config(config),
    )


def get_service(
    config: Config,
    strategies: list[str] | None = None,
    as_of: date | None = None,
    folder_config: FolderStrategyConfig | None = None,
) -> CheckboxFinderService:
    registry = get_registry(config, as_of, folder_config)
    return CheckboxFinderService(registry, strategies or config.active_strategies)
