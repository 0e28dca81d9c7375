"""Ports - interfaces/protocols for external dependencies."""

from .document_store import DocumentStore
from .daily_notes import DailyNotesSettings
from .stream_provider import StreamProvider
from .clock import Clock

__all__ = [
    "DocumentStore",
    "DailyNotesSettings",
    "StreamProvider",
    "Clock",
]
