"""Streams plugin adapter - reads streams from the plugin's data file."""

import json
import logging
from pathlib import Path

from ontask.core.streams import Stream

logger = logging.getLogger(__name__)

PLUGIN_ID = "streams"


class StreamsDataError(Exception):
    """Raised when the Streams plugin data file cannot be parsed."""

    pass


def default_data_file(vault_dir: Path | str, config_dir: str = ".obsidian") -> Path:
    """Location of the Streams plugin settings inside a vault."""
    return Path(vault_dir).expanduser() / config_dir / "plugins" / PLUGIN_ID / "data.json"


class StreamsPluginProvider:
    """
    Streams provider backed by the Streams plugin's data.json.

    Implements StreamProvider protocol. The plugin counts as available when
    its data file exists.
    """

    def __init__(self, data_file: Path | str):
        self.data_file = Path(data_file).expanduser()

    def is_available(self) -> bool:
        return self.data_file.is_file()

    def get_all_streams(self) -> list[Stream]:
        """Fetch all streams in plugin order."""
        if not self.is_available():
            return []

        try:
            data = json.loads(self.data_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            raise StreamsDataError(f"Cannot read streams data in {self.data_file}: {e}") from e

        raw_streams = data.get("streams", []) if isinstance(data, dict) else None
        if not isinstance(raw_streams, list):
            raise StreamsDataError(f"No streams list in {self.data_file}")

        streams = [Stream.from_dict(item) for item in raw_streams if isinstance(item, dict)]
        logger.debug(f"Loaded {len(streams)} streams from {self.data_file}")
        return streams

    def get_stream_by_name(self, name: str) -> Stream | None:
        """Find a stream by name (case-insensitive)."""
        for stream in self.get_all_streams():
            if stream.name.lower() == name.lower():
                return stream
        return None
