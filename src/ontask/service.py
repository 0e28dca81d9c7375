"""Checkbox finder service - runs several strategies on the caller's behalf."""

import logging

from ontask.core.checkboxes import CheckboxItem, FinderContext
from ontask.registry import StrategyRegistry

logger = logging.getLogger(__name__)

DEFAULT_ACTIVE_STRATEGIES = ("streams",)


def remove_duplicates(items: list[CheckboxItem]) -> list[CheckboxItem]:
    """Drop repeats of the same line in the same document, keeping first-seen order."""
    seen: set[tuple[str, int, str]] = set()
    unique = []
    for item in items:
        key = (item.document.path, item.line_number, item.line_content.strip())
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


class CheckboxFinderService:
    """
    Aggregates checkboxes from the active strategies.

    Strategies run in the order they were activated. Each gets the budget
    left over by the ones before it.
    """

    def __init__(
        self,
        registry: StrategyRegistry,
        active_strategies: list[str] | tuple[str, ...] = DEFAULT_ACTIVE_STRATEGIES,
    ):
        self.registry = registry
        self._active: list[str] = list(active_strategies)

    def set_active_strategies(self, names: list[str]) -> None:
        self._active = list(names)

    def get_active_strategies(self) -> list[str]:
        return list(self._active)

    def add_active_strategy(self, name: str) -> None:
        if name not in self._active:
            self._active.append(name)

    def remove_active_strategy(self, name: str) -> None:
        self._active = [n for n in self._active if n != name]

    def find_all_checkboxes(
        self,
        only_show_today: bool = False,
        limit: int | None = None,
    ) -> list[CheckboxItem]:
        """Collect checkboxes from every ready active strategy, up to `limit`."""
        items: list[CheckboxItem] = []

        for name in self._active:
            remaining = None if limit is None else limit - len(items)
            if remaining is not None and remaining <= 0:
                break

            strategy = self.registry.create_strategy(name)
            if strategy is None:
                logger.warning(f"Unknown strategy: {name}")
                continue

            context = FinderContext(only_show_today=only_show_today, limit=remaining)
            try:
                if not strategy.is_available():
                    logger.debug(f"Strategy {name} is not available")
                    continue
                items.extend(strategy.find_checkboxes(context))
            except Exception as e:
                logger.error(f"Error using {name} strategy: {e}")

            items = remove_duplicates(items)

        logger.info(f"Found {len(items)} checkboxes from {len(self._active)} strategies")
        return items

    def find_checkboxes_by_strategy(
        self,
        name: str,
        only_show_today: bool = False,
        limit: int | None = None,
    ) -> list[CheckboxItem]:
        """Run a single strategy. Empty if it is unknown or unavailable."""
        strategy = self.registry.create_strategy(name)
        if strategy is None:
            logger.info(f"Strategy {name} is not registered")
            return []
        try:
            if not strategy.is_available():
                logger.info(f"Strategy {name} is not available")
                return []
            return strategy.find_checkboxes(
                FinderContext(only_show_today=only_show_today, limit=limit)
            )
        except Exception as e:
            logger.error(f"Error using {name} strategy: {e}")
            return []

    def get_checkboxes_by_source(
        self,
        source_name: str,
        only_show_today: bool = False,
    ) -> list[CheckboxItem]:
        return [
            item
            for item in self.find_all_checkboxes(only_show_today)
            if item.source_name == source_name
        ]

    def get_checkboxes_by_file(
        self,
        path: str,
        only_show_today: bool = False,
    ) -> list[CheckboxItem]:
        return [
            item
            for item in self.find_all_checkboxes(only_show_today)
            if item.document.path == path
        ]
