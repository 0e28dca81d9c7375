"""Functional core - pure checkbox logic with no I/O."""

from .documents import Document
from .checkboxes import (
    CheckboxItem,
    CheckboxMatch,
    FinderContext,
    parse_checkbox_line,
    is_completed,
    scan_lines,
)
from .dates import TodayMatcher, extract_dates, is_today_name
from .streams import Stream

__all__ = [
    # Documents
    "Document",
    # Checkboxes
    "CheckboxItem",
    "CheckboxMatch",
    "FinderContext",
    "parse_checkbox_line",
    "is_completed",
    "scan_lines",
    # Dates
    "TodayMatcher",
    "extract_dates",
    "is_today_name",
    # Streams
    "Stream",
]
