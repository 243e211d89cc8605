"""
Lending bounded context.

Items (Things) are lent by lenders to borrowers through a library. Each
item, loan, reservation and fee moves through its own status table; the
library orchestrates borrowing and returning and charges fees through a
pluggable fee schedule.
"""

from .entities import (
    Borrower,
    FirstComeFirstServeWaitingList,
    Lender,
    LibraryFee,
    Loan,
    NullWaitingList,
    Person,
    PersonBorrower,
    Reservation,
    Thing,
    WaitingList,
)
from .factories import MoneyFactory, WaitingListFactory
from .fee_schedules import FeeSchedule, FlatFeeSchedule, PerDayFeeSchedule, ZeroFeeSchedule
from .libraries import (
    DistributedLibrary,
    Library,
    LibrarySearchResult,
    SimpleLibrary,
    TitleSearchResult,
)
from .statuses import (
    FEE_TRANSITIONS,
    LOAN_TRANSITIONS,
    RESERVATION_TRANSITIONS,
    THING_TRANSITIONS,
    BorrowerVerificationFlags,
    FeeStatus,
    LoanStatus,
    ReservationStatus,
    ThingStatus,
    WaitingListType,
)

__all__ = [
    "FEE_TRANSITIONS",
    "LOAN_TRANSITIONS",
    "RESERVATION_TRANSITIONS",
    "THING_TRANSITIONS",
    "Borrower",
    "BorrowerVerificationFlags",
    "DistributedLibrary",
    "FeeSchedule",
    "FeeStatus",
    "FirstComeFirstServeWaitingList",
    "FlatFeeSchedule",
    "Lender",
    "Library",
    "LibraryFee",
    "LibrarySearchResult",
    "Loan",
    "LoanStatus",
    "MoneyFactory",
    "NullWaitingList",
    "PerDayFeeSchedule",
    "Person",
    "PersonBorrower",
    "Reservation",
    "ReservationStatus",
    "SimpleLibrary",
    "Thing",
    "ThingStatus",
    "TitleSearchResult",
    "WaitingList",
    "WaitingListFactory",
    "WaitingListType",
    "ZeroFeeSchedule",
]
