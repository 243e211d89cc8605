"""Lending entities."""

from .borrower import Borrower, Lender
from .library_fee import LibraryFee
from .loan import Loan, derive_loan_status
from .person import Person, PersonBorrower
from .reservation import Reservation
from .thing import Thing
from .waiting_list import FirstComeFirstServeWaitingList, NullWaitingList, WaitingList

__all__ = [
    "Borrower",
    "FirstComeFirstServeWaitingList",
    "Lender",
    "LibraryFee",
    "Loan",
    "NullWaitingList",
    "Person",
    "PersonBorrower",
    "Reservation",
    "Thing",
    "WaitingList",
    "derive_loan_status",
]
