"""Tests for LoanMapper."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ID, DueDate
from lending.domain.lending.statuses import LoanStatus, ThingStatus
from lending.infrastructure.lending.mappers import LoanMapper


@pytest.fixture
def mapper() -> LoanMapper:
    return LoanMapper()


@pytest.fixture
def thing(make_thing):
    thing = make_thing()
    thing.status = ThingStatus.BORROWED
    return thing


@pytest.fixture
def document(thing) -> dict:
    return {
        "loan_id": str(uuid4()),
        "item": {"id": str(thing.id)},
        "borrower": str(uuid4()),
        "due_date": "2024-06-10",
        "status": "WAITING_ON_LENDER_ACCEPTANCE",
        "return_location": {"street_address": "4 Elm St", "city": "Boise"},
        "time_returned": "2024-06-11T09:30:00Z",
    }


def test_maps_loan(mapper, document, thing) -> None:
    loan = mapper.to_domain(document, thing)

    assert loan.id == ID(document["loan_id"])
    assert loan.item is thing
    assert loan.borrower_id == ID(document["borrower"])
    assert loan.due_date == DueDate(datetime(2024, 6, 10, tzinfo=UTC))
    assert loan.stored_status is LoanStatus.WAITING_ON_LENDER_ACCEPTANCE
    assert loan.return_location.city == "Boise"
    assert loan.time_returned == datetime(2024, 6, 11, 9, 30, tzinfo=UTC)


def test_missing_status_restores_active_loan(mapper, document, thing) -> None:
    del document["status"]
    del document["due_date"]
    loan = mapper.to_domain(document, thing)
    assert loan.stored_status is LoanStatus.BORROWED
    assert loan.is_permanent_loan


def test_loan_for_another_item(mapper, document, thing) -> None:
    document["item"] = str(uuid4())
    with pytest.raises(ValidationError):
        mapper.to_domain(document, thing)


def test_to_record(mapper, document, thing) -> None:
    loan = mapper.to_domain(document, thing)
    record = mapper.to_record(loan)

    assert record["due_date"] == "2024-06-10"
    assert record["status"] == "WAITING_ON_LENDER_ACCEPTANCE"
    assert record["item"] == str(thing.id)
    assert record["return_location"]["street_address"] == "4 Elm St"
