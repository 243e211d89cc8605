"""Tests for Person, PersonBorrower and LibraryFee."""

import pytest

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ID, Currency, EmailAddress, Money, PersonName
from lending.domain.lending.entities import Borrower, LibraryFee, Person, PersonBorrower
from lending.domain.lending.statuses import BorrowerVerificationFlags, FeeStatus


def _fee(amount: int) -> LibraryFee:
    return LibraryFee.create(
        library_id=ID.generate(), amount=Money(amount, Currency.USD), charged_for_id=ID.generate()
    )


def test_person_borrower_satisfies_borrower_protocol(make_borrower) -> None:
    assert isinstance(make_borrower(), Borrower)


def test_preferred_email_is_first() -> None:
    person = Person(
        id=ID.generate(),
        name=PersonName(first_name="Sam", last_name="Lee", salutation="Dr."),
        emails=[EmailAddress("sam@example.org"), EmailAddress("s.lee@example.org")],
    )
    assert str(person.preferred_email) == "sam@example.org"
    assert str(person.name) == "Dr. Sam Lee"


def test_person_without_email() -> None:
    person = Person(id=ID.generate(), name=PersonName(first_name="Sam", last_name="Lee"))
    assert person.preferred_email is None


def test_invalid_email_is_rejected() -> None:
    with pytest.raises(ValidationError):
        EmailAddress("not-an-email")


def test_outstanding_fees(make_borrower) -> None:
    borrower = make_borrower()
    paid, open_fee = _fee(3), _fee(4)
    borrower.apply_fee(paid).apply_fee(open_fee)

    paid.mark_paid()

    assert borrower.fees == (paid, open_fee)
    assert borrower.outstanding_fees == (open_fee,)
    assert paid.status is FeeStatus.PAID


def test_waive_fee() -> None:
    fee = _fee(2)
    fee.waive()
    assert fee.status is FeeStatus.WAIVED
    assert not fee.is_outstanding


def test_verification_flags(make_borrower) -> None:
    borrower: PersonBorrower = make_borrower()
    borrower.verification_flags.append(BorrowerVerificationFlags.EMAIL_VERIFIED)
    assert borrower.is_verified(BorrowerVerificationFlags.EMAIL_VERIFIED)
    assert not borrower.is_verified(BorrowerVerificationFlags.IDENTITY_VERIFIED)
