"""
System clock adapter.

Default ``IClock`` implementation backed by the system time (UTC).
"""

from datetime import UTC, datetime, timedelta


class SystemClock:
    """Clock that reads the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> int:
        return int(self.now().timestamp() * 1000)

    def create_date(self, value: datetime | str | int | float | None) -> datetime | None:
        """
        Normalize a stored date into an aware datetime.

        Accepts datetimes, ISO-8601 strings and epoch milliseconds.
        Naive values are assumed to be UTC.
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            result = value
        elif isinstance(value, (int, float)):
            result = datetime.fromtimestamp(value / 1000, UTC)
        else:
            result = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        if result.tzinfo is None:
            result = result.replace(tzinfo=UTC)
        return result

    def add_time(self, date: datetime, delta: timedelta) -> datetime:
        return date + delta

    def is_before(self, first: datetime, second: datetime) -> bool:
        return first < second

    def is_after(self, first: datetime, second: datetime) -> bool:
        return first > second
