"""
Status enumerations and their transition tables.

The tables below are part of the lending contract: callers that
hard-code which status changes succeed rely on them exactly as written.

Thing:
    READY -> [WAITING_FOR_LENDER_APPROVAL_TO_BORROW|RESERVED|BORROWED]
    WAITING_FOR_LENDER_APPROVAL_TO_BORROW -> [READY|BORROWED]
    BORROWED -> [READY|RESERVED|DAMAGED]
    RESERVED -> [READY|BORROWED]
    DAMAGED (terminal)

Loan:
    RETURNED -> BORROWED  (RETURNED doubles as the pre-activation placeholder)
    BORROWED -> [RETURN_STARTED|OVERDUE]
    OVERDUE -> RETURN_STARTED
    RETURN_STARTED -> [WAITING_ON_LENDER_ACCEPTANCE|RETURNED|RETURNED_DAMAGED]
    WAITING_ON_LENDER_ACCEPTANCE -> [RETURNED|RETURNED_DAMAGED|OVERDUE]
    RETURNED_DAMAGED (terminal)

Reservation:
    ASSIGNED -> BORROWER_NOTIFIED
    BORROWER_NOTIFIED -> [EXPIRED|BORROWED]
    BORROWED, EXPIRED, CANCELLED (terminal)
"""

from enum import Enum

from lending.domain.common.state_machine import TransitionTable

from .exceptions import (
    InvalidFeeStateTransitionError,
    InvalidLoanStateTransitionError,
    InvalidReservationStateTransitionError,
    InvalidThingStateTransitionError,
)


class ThingStatus(str, Enum):
    READY = "READY"
    WAITING_FOR_LENDER_APPROVAL_TO_BORROW = "WAITING_FOR_LENDER_APPROVAL_TO_BORROW"
    RESERVED = "RESERVED"
    BORROWED = "BORROWED"
    DAMAGED = "DAMAGED"


class LoanStatus(str, Enum):
    BORROWED = "BORROWED"
    OVERDUE = "OVERDUE"
    RETURN_STARTED = "RETURN_STARTED"
    WAITING_ON_LENDER_ACCEPTANCE = "WAITING_ON_LENDER_ACCEPTANCE"
    RETURNED = "RETURNED"
    RETURNED_DAMAGED = "RETURNED_DAMAGED"


class ReservationStatus(str, Enum):
    ASSIGNED = "ASSIGNED"
    BORROWER_NOTIFIED = "BORROWER_NOTIFIED"
    EXPIRED = "EXPIRED"
    BORROWED = "BORROWED"
    CANCELLED = "CANCELLED"


class FeeStatus(str, Enum):
    OUTSTANDING = "OUTSTANDING"
    PAID = "PAID"
    WAIVED = "WAIVED"


class WaitingListType(str, Enum):
    FIRST_COME_FIRST_SERVE = "FIRST_COME_FIRST_SERVE"
    NONE = "NONE"


class BorrowerVerificationFlags(str, Enum):
    EMAIL_VERIFIED = "EMAIL_VERIFIED"
    PHONE_VERIFIED = "PHONE_VERIFIED"
    ADDRESS_VERIFIED = "ADDRESS_VERIFIED"
    IDENTITY_VERIFIED = "IDENTITY_VERIFIED"


THING_TRANSITIONS: TransitionTable[ThingStatus] = TransitionTable(
    "thing",
    {
        ThingStatus.READY: frozenset({
            ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW,
            ThingStatus.RESERVED,
            ThingStatus.BORROWED,
        }),
        ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW: frozenset({
            ThingStatus.READY,
            ThingStatus.BORROWED,
        }),
        ThingStatus.BORROWED: frozenset({
            ThingStatus.READY,
            ThingStatus.RESERVED,
            ThingStatus.DAMAGED,
        }),
        ThingStatus.RESERVED: frozenset({ThingStatus.READY, ThingStatus.BORROWED}),
        ThingStatus.DAMAGED: frozenset(),
    },
    InvalidThingStateTransitionError,
)

LOAN_TRANSITIONS: TransitionTable[LoanStatus] = TransitionTable(
    "loan",
    {
        LoanStatus.RETURNED: frozenset({LoanStatus.BORROWED}),
        LoanStatus.BORROWED: frozenset({LoanStatus.RETURN_STARTED, LoanStatus.OVERDUE}),
        LoanStatus.OVERDUE: frozenset({LoanStatus.RETURN_STARTED}),
        LoanStatus.RETURN_STARTED: frozenset({
            LoanStatus.WAITING_ON_LENDER_ACCEPTANCE,
            LoanStatus.RETURNED,
            LoanStatus.RETURNED_DAMAGED,
        }),
        LoanStatus.WAITING_ON_LENDER_ACCEPTANCE: frozenset({
            LoanStatus.RETURNED,
            LoanStatus.RETURNED_DAMAGED,
            LoanStatus.OVERDUE,
        }),
        LoanStatus.RETURNED_DAMAGED: frozenset(),
    },
    InvalidLoanStateTransitionError,
)

RESERVATION_TRANSITIONS: TransitionTable[ReservationStatus] = TransitionTable(
    "reservation",
    {
        ReservationStatus.ASSIGNED: frozenset({ReservationStatus.BORROWER_NOTIFIED}),
        ReservationStatus.BORROWER_NOTIFIED: frozenset({
            ReservationStatus.EXPIRED,
            ReservationStatus.BORROWED,
        }),
        ReservationStatus.BORROWED: frozenset(),
        ReservationStatus.EXPIRED: frozenset(),
        ReservationStatus.CANCELLED: frozenset(),
    },
    InvalidReservationStateTransitionError,
)

FEE_TRANSITIONS: TransitionTable[FeeStatus] = TransitionTable(
    "fee",
    {
        FeeStatus.OUTSTANDING: frozenset({FeeStatus.PAID, FeeStatus.WAIVED}),
        FeeStatus.PAID: frozenset(),
        FeeStatus.WAIVED: frozenset(),
    },
    InvalidFeeStateTransitionError,
)
