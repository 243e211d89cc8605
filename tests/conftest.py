"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from lending.domain.common.value_objects import (
    ID,
    Currency,
    DueDate,
    Money,
    PersonName,
    PhysicalLocation,
    ThingTitle,
)
from lending.domain.lending.entities import PersonBorrower, Thing
from lending.domain.lending.factories import MoneyFactory
from lending.domain.lending.fee_schedules import PerDayFeeSchedule
from lending.domain.lending.libraries import SimpleLibrary
from lending.domain.lending.statuses import WaitingListType


@pytest.fixture
def owner_id() -> ID:
    return ID.generate()


@pytest.fixture
def workshop() -> PhysicalLocation:
    return PhysicalLocation(
        street_address="12 Mill Lane",
        city="Portland",
        state="OR",
        zip_code="97201",
        country="US",
        latitude=45.5152,
        longitude=-122.6784,
    )


@pytest.fixture
def make_thing(owner_id: ID, workshop: PhysicalLocation) -> Callable[..., Thing]:
    """Build READY items owned by ``owner_id`` unless told otherwise."""

    def _make(name: str = "Cordless Drill", owner: ID | None = None) -> Thing:
        return Thing.create(
            title=ThingTitle(name=name),
            owner_id=owner or owner_id,
            storage_location=workshop,
        )

    return _make


@pytest.fixture
def library(workshop: PhysicalLocation) -> SimpleLibrary:
    return SimpleLibrary(
        id=ID.generate(),
        name="Mill Lane Tool Library",
        waiting_list_type=WaitingListType.FIRST_COME_FIRST_SERVE,
        max_fines_before_suspension=Money(Decimal("10"), Currency.USD),
        fee_schedule=PerDayFeeSchedule(
            daily_charge=Money(Decimal("1.50"), Currency.USD),
            damaged_item_fee=Money(Decimal("25"), Currency.USD),
        ),
        default_loan_time=timedelta(days=14),
        money_factory=MoneyFactory(default_currency=Currency.USD),
        location=workshop,
    )


@pytest.fixture
def make_borrower(library: SimpleLibrary) -> Callable[..., PersonBorrower]:
    """Build members of ``library``."""

    def _make(first_name: str = "Robin", library_id: ID | None = None) -> PersonBorrower:
        return PersonBorrower.create(
            name=PersonName(first_name=first_name, last_name="Example"),
            library_id=library_id or library.id,
        )

    return _make


@pytest.fixture
def next_week() -> DueDate:
    return DueDate(datetime.now(UTC) + timedelta(days=7))
