"""Date matching for date-named documents."""

import re
from datetime import date

from .documents import Document

ISO_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def extract_dates(name: str) -> list[date]:
    """Return every valid YYYY-MM-DD date embedded in a name."""
    dates = []
    for m in ISO_DATE_RE.finditer(name):
        try:
            dates.append(date(int(m.group(1)), int(m.group(2)), int(m.group(3))))
        except ValueError:
            continue
    return dates


def is_today_name(name: str, today: date) -> bool:
    """True if the name embeds `today` as an ISO date."""
    return today in extract_dates(name)


class TodayMatcher:
    """
    Decides whether a document belongs to the current day.

    The current date comes from the injected clock, so results are
    deterministic under test.
    """

    def __init__(self, clock):
        self.clock = clock

    def today(self) -> date:
        return self.clock.today()

    def matches(self, document: Document) -> bool:
        return is_today_name(document.name, self.today())

    def filter(self, documents: list[Document]) -> list[Document]:
        today = self.today()
        return [d for d in documents if is_today_name(d.name, today)]
