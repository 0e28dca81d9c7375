"""Clock adapters."""

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class SystemClock:
    """
    Wall clock in the configured timezone.

    Implements Clock protocol. Falls back to the local timezone when none is set.
    """

    def __init__(self, timezone: str | None = None):
        self.timezone = timezone or None
        try:
            self._tz = ZoneInfo(timezone) if timezone else None
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {timezone}") from e

    def today(self) -> date:
        if self._tz is None:
            return date.today()
        return datetime.now(self._tz).date()


class FixedClock:
    """Clock pinned to a single date. Implements Clock protocol."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
