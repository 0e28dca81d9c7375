"""Adapters - I/O implementations of ports."""

from .file_vault import FileVault
from .obsidian_daily_notes import ObsidianDailyNotes
from .streams_plugin import StreamsPluginProvider, StreamsDataError
from .clock import SystemClock, FixedClock

__all__ = [
    "FileVault",
    "ObsidianDailyNotes",
    "StreamsPluginProvider",
    "StreamsDataError",
    "SystemClock",
    "FixedClock",
]
