"""Tests for translating domain errors at the boundary."""

import pytest

from lending.domain.common.exceptions import (
    AuthorizationError,
    CurrencyMismatchError,
    DomainError,
    MalformedIdError,
)
from lending.domain.lending.exceptions import (
    BorrowerNotInGoodStandingError,
    BorrowRequestCooldownError,
    CannotBorrowOwnItemError,
    InvalidLibraryConfigurationError,
    InvalidLoanStateTransitionError,
    InvalidThingStatusToBorrowError,
    LenderNotFoundError,
    LenderNotRegisteredError,
    NotEligibleToRequestError,
    ReservationAlreadyExistsError,
    ReturnNotStartedError,
)
from lending.domain.lending.statuses import LoanStatus, ThingStatus
from lending.exceptions import LendingError, status_code_for, to_lending_error


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (MalformedIdError("x"), 400),
        (InvalidThingStatusToBorrowError(ThingStatus.BORROWED), 400),
        (ReturnNotStartedError(), 400),
        (ReservationAlreadyExistsError(), 400),
        (LenderNotFoundError("Tent"), 400),
        (AuthorizationError(), 403),
        (BorrowerNotInGoodStandingError(), 403),
        (CannotBorrowOwnItemError(), 403),
        (NotEligibleToRequestError(), 403),
        (LenderNotRegisteredError("abc"), 404),
        (InvalidLoanStateTransitionError(LoanStatus.RETURNED, LoanStatus.OVERDUE), 409),
        (BorrowRequestCooldownError(120), 429),
        (InvalidLibraryConfigurationError(), 500),
        (CurrencyMismatchError(), 500),
        (DomainError("boom"), 500),
    ],
)
def test_status_codes(error: DomainError, status_code: int) -> None:
    assert status_code_for(error) == status_code


def test_translation_keeps_message_and_details() -> None:
    translated = to_lending_error(InvalidThingStatusToBorrowError(ThingStatus.RESERVED))
    assert isinstance(translated, LendingError)
    assert translated.message == "Item cannot be borrowed while RESERVED"
    assert translated.details == {"status": "RESERVED"}
    assert translated.status_code == 400


def test_cooldown_carries_retry_after() -> None:
    translated = to_lending_error(BorrowRequestCooldownError(90))
    assert translated.status_code == 429
    assert translated.details["retry_after_seconds"] == 90
    assert "2 minute(s)" in translated.message
