"""Pure checkbox parsing and result types - no I/O dependencies."""

import re
from dataclasses import dataclass

from .documents import Document

STATUS_INCOMPLETE = " "
STATUS_COMPLETE = "x"
STATUS_IN_PROGRESS = "/"

# List marker, then a single status character in brackets, then the task text.
CHECKBOX_RE = re.compile(r"^[-*+]\s*\[([^\]])\]\s*(.*)$")
# Physical line breaks only, so line numbers match the file.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class CheckboxMatch:
    """The parts of a line recognised as a checkbox."""

    status: str
    text: str


def parse_checkbox_line(line: str) -> CheckboxMatch | None:
    """
    Match a single markdown line against the checkbox pattern.

    Any single status character is accepted so custom statuses pass through.
    Returns None for lines that are not checkboxes.
    """
    m = CHECKBOX_RE.match(line.strip())
    if not m:
        return None
    return CheckboxMatch(status=m.group(1), text=m.group(2))


def is_completed(status: str) -> bool:
    return status.lower() == STATUS_COMPLETE


@dataclass(frozen=True)
class CheckboxItem:
    """One checkbox occurrence found during a scan."""

    document: Document
    line_number: int
    line_content: str
    checkbox_text: str
    source_name: str
    source_path: str
    status: str = STATUS_INCOMPLETE
    # Reserved for downstream ranking; scanners leave these untouched.
    is_top_task: bool | None = None
    is_top_task_contender: bool | None = None

    @property
    def is_completed(self) -> bool:
        return is_completed(self.status)


@dataclass
class FinderContext:
    """Per-request options threaded through every strategy call."""

    only_show_today: bool = False
    limit: int | None = None
    file_paths: list[str] | None = None

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be non-negative, got {self.limit}")


def scan_lines(
    document: Document,
    content: str,
    source_name: str,
    limit: int | None = None,
) -> list[CheckboxItem]:
    """
    Find checkbox lines in a document's content.

    Line numbers are 1-based. Stops once `limit` items have been collected.
    Pure function - the caller supplies the content.
    """
    items: list[CheckboxItem] = []
    if limit is not None and limit <= 0:
        return items

    for index, line in enumerate(LINE_BREAK_RE.split(content), start=1):
        match = parse_checkbox_line(line)
        if match is None:
            continue
        items.append(
            CheckboxItem(
                document=document,
                line_number=index,
                line_content=line,
                checkbox_text=match.text,
                source_name=source_name,
                source_path=document.path,
                status=match.status,
            )
        )
        if limit is not None and len(items) >= limit:
            break
    return items
