"""Checkbox source strategies."""

from .base import TaskSourceStrategy, DocumentScanStrategy
from .daily_notes import DailyNotesStrategy
from .folder import FolderStrategy, FolderStrategyConfig
from .streams import StreamsStrategy

__all__ = [
    "TaskSourceStrategy",
    "DocumentScanStrategy",
    "DailyNotesStrategy",
    "FolderStrategy",
    "FolderStrategyConfig",
    "StreamsStrategy",
]
