"""Daily notes settings adapter - reads the vault's Obsidian configuration."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CORE_PLUGIN_ID = "daily-notes"
PERIODIC_NOTES_PLUGIN_ID = "periodic-notes"


class ObsidianDailyNotes:
    """
    Daily notes settings from an Obsidian vault.

    Implements DailyNotesSettings protocol. Settings are re-read on every call
    because the feature can be toggled while the vault is open.
    """

    def __init__(
        self,
        vault_dir: Path | str,
        folder_override: str = "",
        config_dir: str = ".obsidian",
    ):
        self.vault_dir = Path(vault_dir).expanduser()
        self.config_path = self.vault_dir / config_dir
        self.folder_override = folder_override

    def _read_json(self, relative: str) -> dict | list | None:
        """Read a settings file. Returns None if missing or malformed."""
        path = self.config_path / relative
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None

    def _core_plugin_enabled(self) -> bool:
        # Older vaults store a list of enabled ids, newer ones an id -> bool map
        core = self._read_json("core-plugins.json")
        if isinstance(core, list):
            return CORE_PLUGIN_ID in core
        if isinstance(core, dict):
            return bool(core.get(CORE_PLUGIN_ID))
        return False

    def _periodic_notes_enabled(self) -> bool:
        community = self._read_json("community-plugins.json")
        return isinstance(community, list) and PERIODIC_NOTES_PLUGIN_ID in community

    def is_enabled(self) -> bool:
        """Check if the core daily notes feature or Periodic Notes is enabled."""
        return self._core_plugin_enabled() or self._periodic_notes_enabled()

    def folder(self) -> str:
        """Configured daily notes folder. Empty if none is set."""
        if self.folder_override:
            return self.folder_override

        settings = self._read_json("daily-notes.json")
        if isinstance(settings, dict) and settings.get("folder"):
            return str(settings["folder"]).strip()

        periodic = self._read_json(f"plugins/{PERIODIC_NOTES_PLUGIN_ID}/data.json")
        if isinstance(periodic, dict):
            daily = periodic.get("daily") or {}
            if isinstance(daily, dict) and daily.get("folder"):
                return str(daily["folder"]).strip()

        return ""
