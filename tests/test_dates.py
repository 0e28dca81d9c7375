"""Tests for today matching."""

from datetime import date

from ontask.adapters.clock import FixedClock
from ontask.core.dates import TodayMatcher, extract_dates, is_today_name
from ontask.core.documents import Document


class TestExtractDates:
    def test_whole_stem(self):
        assert extract_dates("2024-01-15.md") == [date(2024, 1, 15)]

    def test_embedded_in_name(self):
        assert extract_dates("Standup 2024-01-15 notes.md") == [date(2024, 1, 15)]

    def test_multiple_dates(self):
        assert extract_dates("2024-01-14 to 2024-01-15") == [
            date(2024, 1, 14),
            date(2024, 1, 15),
        ]

    def test_invalid_calendar_date_ignored(self):
        assert extract_dates("2024-13-40.md") == []

    def test_no_date(self):
        assert extract_dates("Shopping list.md") == []


class TestIsTodayName:
    def test_matches_today(self):
        assert is_today_name("2024-01-15.md", date(2024, 1, 15)) is True

    def test_other_day(self):
        assert is_today_name("2024-01-14.md", date(2024, 1, 15)) is False

    def test_other_formats_do_not_match(self):
        assert is_today_name("20240115.md", date(2024, 1, 15)) is False
        assert is_today_name("15-01-2024.md", date(2024, 1, 15)) is False

    def test_undated_name(self):
        assert is_today_name("Inbox.md", date(2024, 1, 15)) is False


class TestTodayMatcher:
    def test_uses_injected_clock(self):
        matcher = TodayMatcher(FixedClock(date(2024, 1, 15)))
        assert matcher.today() == date(2024, 1, 15)
        assert matcher.matches(Document.from_path("Daily/2024-01-15.md")) is True
        assert matcher.matches(Document.from_path("Daily/2024-01-14.md")) is False

    def test_matches_on_name_not_folder(self):
        matcher = TodayMatcher(FixedClock(date(2024, 1, 15)))
        assert matcher.matches(Document.from_path("2024-01-15/notes.md")) is False

    def test_filter_preserves_order(self):
        matcher = TodayMatcher(FixedClock(date(2024, 1, 15)))
        docs = [
            Document.from_path("b/2024-01-15.md"),
            Document.from_path("a/2024-01-14.md"),
            Document.from_path("a/2024-01-15 review.md"),
        ]
        assert [d.path for d in matcher.filter(docs)] == [
            "b/2024-01-15.md",
            "a/2024-01-15 review.md",
        ]
