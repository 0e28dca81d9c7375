"""Time source interface."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Interface for reading the current calendar date."""

    def today(self) -> date:
        ...
