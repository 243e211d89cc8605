"""
Borrower and Lender capabilities.

Libraries dispatch through these protocols instead of concrete classes:
anything with the right shape can borrow (PersonBorrower) or lend
(SimpleLibrary).
"""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lending.domain.common.value_objects import ID, Location

if TYPE_CHECKING:
    from lending.domain.lending.statuses import BorrowerVerificationFlags

    from .library_fee import LibraryFee
    from .loan import Loan
    from .thing import Thing


@runtime_checkable
class Borrower(Protocol):
    id: ID
    library_id: ID | None
    verification_flags: "list[BorrowerVerificationFlags]"

    @property
    def fees(self) -> "Sequence[LibraryFee]": ...

    def apply_fee(self, fee: "LibraryFee") -> "Borrower": ...


@runtime_checkable
class Lender(Protocol):
    id: ID

    @property
    def items(self) -> "Iterable[Thing]": ...

    @property
    def preferred_return_location(self) -> Location: ...

    def add_item(self, item: "Thing") -> "Thing": ...

    def start_return(self, loan: "Loan") -> "Loan": ...

    def finish_return(self, loan: "Loan") -> "Loan": ...
