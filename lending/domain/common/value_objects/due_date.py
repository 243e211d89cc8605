"""
DueDate value object.

Wraps an optional datetime; ``None`` marks a permanent loan that is never
due. All comparisons strip the time of day and work on the UTC calendar
day.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Self

from ..value_object import ValueObject


def utc_day(moment: datetime) -> date:
    """Return the UTC calendar day of a datetime (naive values are taken as UTC)."""
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(UTC).date()


@dataclass(frozen=True, eq=False)
class DueDate(ValueObject):
    date: datetime | None = None

    @classmethod
    def of(cls, moment: datetime | None) -> Self:
        return cls(moment)

    @property
    def is_permanent(self) -> bool:
        return self.date is None

    def is_after_now(self, now: datetime | None = None) -> bool:
        """True only if the due day is strictly after today (UTC)."""
        if self.date is None:
            return False
        today = utc_day(now or datetime.now(UTC))
        return utc_day(self.date) > today

    def days_overdue(self, now: datetime | None = None) -> int:
        """Whole calendar days past the due day, never negative."""
        if self.date is None:
            return 0
        today = utc_day(now or datetime.now(UTC))
        return max(0, (today - utc_day(self.date)).days)

    def __lt__(self, other: "DueDate | datetime") -> bool:
        if self.date is None:
            return False
        other_date = other.date if isinstance(other, DueDate) else other
        if other_date is None:
            return True
        return utc_day(self.date) < utc_day(other_date)

    def __gt__(self, other: "DueDate") -> bool:
        if self.date is None or other.date is None:
            return True
        return utc_day(self.date) > utc_day(other.date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DueDate):
            return False
        if self.date is None or other.date is None:
            return self.date is None and other.date is None
        return utc_day(self.date) == utc_day(other.date)

    def __hash__(self) -> int:
        return hash(utc_day(self.date) if self.date else None)
