"""Stream provider interface."""

from typing import Protocol

from ontask.core.streams import Stream


class StreamProvider(Protocol):
    """Interface for the optional Streams integration."""

    def is_available(self) -> bool:
        """Check if the streams integration is present."""
        ...

    def get_all_streams(self) -> list[Stream]:
        """Fetch all configured streams."""
        ...
