"""Strategy registry - named lookup of checkbox sources."""

import logging

from ontask.core.dates import TodayMatcher
from ontask.ports.clock import Clock
from ontask.ports.daily_notes import DailyNotesSettings
from ontask.ports.document_store import DocumentStore
from ontask.ports.stream_provider import StreamProvider
from ontask.strategies import (
    DailyNotesStrategy,
    FolderStrategy,
    FolderStrategyConfig,
    StreamsStrategy,
    TaskSourceStrategy,
)

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """
    Mapping from strategy name to strategy instance.

    Holds no scan state and caches no results. "Registered" does not imply
    "available": availability is each strategy's own runtime check.
    """

    def __init__(
        self,
        store: DocumentStore,
        matcher: TodayMatcher,
        strategies: dict[str, TaskSourceStrategy] | None = None,
    ):
        self.store = store
        self.matcher = matcher
        self._strategies: dict[str, TaskSourceStrategy] = dict(strategies or {})

    def create_strategy(self, name: str) -> TaskSourceStrategy | None:
        """Look up a strategy by name. Returns None if unknown."""
        return self._strategies.get(name)

    def get_available_strategies(self) -> list[str]:
        """Names of all registered strategies, in registration order."""
        return list(self._strategies)

    def register_strategy(self, name: str, strategy: TaskSourceStrategy) -> None:
        """Register a strategy, replacing any existing one with the same name."""
        if name in self._strategies:
            logger.debug(f"Replacing strategy {name}")
        self._strategies[name] = strategy

    def get_ready_strategies(self) -> list[TaskSourceStrategy]:
        """Registered strategies that are currently available."""
        return [s for s in self._strategies.values() if s.is_available()]

    def get_ready_strategy_names(self) -> list[str]:
        return [name for name, s in self._strategies.items() if s.is_available()]

    def create_folder_strategy(self, config: FolderStrategyConfig) -> FolderStrategy:
        """Build a new, unregistered folder strategy sharing this registry's store."""
        return FolderStrategy(self.store, self.matcher, config)


def build_registry(
    store: DocumentStore,
    daily_notes: DailyNotesSettings,
    stream_provider: StreamProvider,
    clock: Clock,
    folder_config: FolderStrategyConfig | None = None,
) -> StrategyRegistry:
    """Create a registry populated with the built-in strategies."""
    matcher = TodayMatcher(clock)
    registry = StrategyRegistry(store, matcher)
    registry.register_strategy(
        DailyNotesStrategy.name, DailyNotesStrategy(store, matcher, daily_notes)
    )
    registry.register_strategy(
        FolderStrategy.name, FolderStrategy(store, matcher, folder_config)
    )
    registry.register_strategy(
        StreamsStrategy.name, StreamsStrategy(store, matcher, stream_provider)
    )
    return registry
