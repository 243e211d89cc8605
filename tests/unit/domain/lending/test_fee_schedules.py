"""Tests for fee schedules and factories."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from lending.domain.common.exceptions import CurrencyMismatchError
from lending.domain.common.value_objects import ID, Currency, DueDate, Money
from lending.domain.lending.entities import FirstComeFirstServeWaitingList, Loan, NullWaitingList
from lending.domain.lending.exceptions import InvalidLibraryConfigurationError
from lending.domain.lending.factories import MoneyFactory, WaitingListFactory
from lending.domain.lending.fee_schedules import (
    FlatFeeSchedule,
    PerDayFeeSchedule,
    ZeroFeeSchedule,
)
from lending.domain.lending.statuses import LoanStatus, ThingStatus, WaitingListType

DUE = datetime(2024, 6, 10, 17, 0, tzinfo=UTC)


@pytest.fixture
def make_loan(make_thing):
    def _make(due: datetime | None, returned: datetime | None) -> Loan:
        thing = make_thing()
        thing.status = ThingStatus.BORROWED
        return Loan.create_with_id(
            id=ID.generate(),
            item=thing,
            due_date=DueDate(due),
            borrower_id=ID.generate(),
            status=LoanStatus.WAITING_ON_LENDER_ACCEPTANCE,
            time_returned=returned,
        )

    return _make


class TestPerDayFeeSchedule:
    def test_charges_per_whole_day_late(self, make_loan) -> None:
        schedule = PerDayFeeSchedule(daily_charge=Money(Decimal("0.25"), Currency.EUR))
        loan = make_loan(DUE, DUE + timedelta(days=4, hours=1))
        assert schedule.fee_for_overdue_item(loan) == Money(Decimal("1.00"), Currency.EUR)

    def test_permanent_loans_cost_nothing(self, make_loan) -> None:
        schedule = PerDayFeeSchedule(daily_charge=Money(1, Currency.USD))
        loan = make_loan(None, DUE)
        assert schedule.fee_for_overdue_item(loan) == Money(0, Currency.USD)

    def test_damaged_fee_is_optional(self, make_loan) -> None:
        loan = make_loan(DUE, DUE)
        schedule = PerDayFeeSchedule(daily_charge=Money(1, Currency.USD))
        assert schedule.fee_for_damaged_item(loan) is None


def test_flat_fee_schedule(make_loan) -> None:
    schedule = FlatFeeSchedule(
        overdue_fee=Money(5, Currency.USD), damaged_fee=Money(50, Currency.USD)
    )
    loan = make_loan(DUE, DUE + timedelta(days=30))
    assert schedule.fee_for_overdue_item(loan) == Money(5, Currency.USD)
    assert schedule.fee_for_damaged_item(loan) == Money(50, Currency.USD)


def test_zero_fee_schedule(make_loan) -> None:
    schedule = ZeroFeeSchedule()
    loan = make_loan(DUE, DUE + timedelta(days=30))
    assert schedule.fee_for_overdue_item(loan) == Money(0, Currency.USD)
    assert schedule.fee_for_damaged_item(loan) == Money(0, Currency.USD)


class TestMoneyFactory:
    def test_empty_uses_default_currency(self) -> None:
        assert MoneyFactory().empty() == Money(0, Currency.EUR)
        assert MoneyFactory(default_currency=Currency.USD).empty() == Money(0, Currency.USD)

    def test_total_of_nothing(self) -> None:
        assert MoneyFactory().total([], currency=Currency.HOUR) == Money(0, Currency.HOUR)

    def test_total_uses_first_currency(self) -> None:
        total = MoneyFactory().total([Money(2, Currency.USD), Money(3, Currency.USD)])
        assert total == Money(5, Currency.USD)

    def test_total_rejects_mixed_currencies(self) -> None:
        with pytest.raises(CurrencyMismatchError):
            MoneyFactory().total([Money(2, Currency.USD), Money(3, Currency.EUR)])

    def test_total_rejects_amounts_outside_requested_currency(self) -> None:
        with pytest.raises(CurrencyMismatchError):
            MoneyFactory().total([Money(2, Currency.EUR)], currency=Currency.USD)


class TestWaitingListFactory:
    class _Config:
        def __init__(self, waiting_list_type) -> None:
            self.waiting_list_type = waiting_list_type

    def test_none_builds_null_list(self, make_thing) -> None:
        waiting_list = WaitingListFactory().create_new_list(
            self._Config(WaitingListType.NONE), make_thing()
        )
        assert isinstance(waiting_list, NullWaitingList)

    def test_first_come_first_serve(self, make_thing) -> None:
        item = make_thing()
        waiting_list = WaitingListFactory(reservation_days=7).create_new_list(
            self._Config(WaitingListType.FIRST_COME_FIRST_SERVE), item
        )
        assert isinstance(waiting_list, FirstComeFirstServeWaitingList)
        assert waiting_list.item is item
        assert waiting_list.get_reservation_time() == timedelta(days=7)

    def test_unknown_type_is_a_configuration_error(self, make_thing) -> None:
        with pytest.raises(InvalidLibraryConfigurationError):
            WaitingListFactory().create_new_list(self._Config("LOTTERY"), make_thing())
