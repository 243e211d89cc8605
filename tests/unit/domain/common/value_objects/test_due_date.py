"""Tests for DueDate value object."""

from datetime import UTC, datetime, timedelta

from lending.domain.common.value_objects import DueDate

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


class TestDueDate:
    def test_permanent_due_date_is_never_after_now(self) -> None:
        due = DueDate(None)
        assert due.is_permanent
        assert due.is_after_now(NOW) is False
        assert due.days_overdue(NOW) == 0

    def test_later_the_same_day_is_not_after_now(self) -> None:
        due = DueDate(NOW + timedelta(hours=6))
        assert due.is_after_now(NOW) is False

    def test_tomorrow_is_after_now(self) -> None:
        assert DueDate(NOW + timedelta(days=1)).is_after_now(NOW) is True

    def test_days_overdue_counts_calendar_days(self) -> None:
        due = DueDate(NOW - timedelta(days=3, hours=11))
        assert due.days_overdue(NOW) == 3

    def test_days_overdue_is_never_negative(self) -> None:
        assert DueDate(NOW + timedelta(days=5)).days_overdue(NOW) == 0

    def test_equality_ignores_time_of_day(self) -> None:
        morning = DueDate(NOW.replace(hour=1))
        evening = DueDate(NOW.replace(hour=23))
        assert morning == evening
        assert hash(morning) == hash(evening)

    def test_ordering_by_day(self) -> None:
        earlier = DueDate(NOW)
        later = DueDate(NOW + timedelta(days=1))
        assert earlier < later
        assert later > earlier
        assert not earlier < DueDate(NOW.replace(hour=23))

    def test_compares_with_datetime(self) -> None:
        assert DueDate(NOW) < NOW + timedelta(days=1)
        assert not DueDate(NOW) < NOW + timedelta(hours=6)

    def test_of(self) -> None:
        assert DueDate.of(NOW) == DueDate(NOW)
        assert DueDate.of(None).is_permanent
