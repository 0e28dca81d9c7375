"""Daily notes settings interface."""

from typing import Protocol


class DailyNotesSettings(Protocol):
    """Interface for the host's date-stamped note feature."""

    def is_enabled(self) -> bool:
        """Check if daily notes are enabled (core feature or plugin)."""
        ...

    def folder(self) -> str:
        """Folder where daily notes are created. Empty if not configured."""
        ...
