"""
Clock interface.

Every place in the domain that needs the current time receives an
``IClock`` so behaviour can be pinned in tests.
"""

from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class IClock(Protocol):
    """Source of the current time and small date helpers."""

    def now(self) -> datetime:
        """Current timezone-aware datetime"""
        ...

    def timestamp(self) -> int:
        """Current time in milliseconds since the epoch"""
        ...

    def create_date(self, value: datetime | str | int | float | None) -> datetime | None:
        """Build a datetime from an ISO string, epoch milliseconds or datetime"""
        ...

    def add_time(self, date: datetime, delta: timedelta) -> datetime:
        """Return date shifted by delta"""
        ...

    def is_before(self, first: datetime, second: datetime) -> bool:
        """True if first happens strictly before second"""
        ...

    def is_after(self, first: datetime, second: datetime) -> bool:
        """True if first happens strictly after second"""
        ...
