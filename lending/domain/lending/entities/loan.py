"""
Loan entity: a single borrow transaction for a Thing.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID, DueDate, Location
from lending.domain.lending.statuses import LOAN_TRANSITIONS, LoanStatus

from .thing import Thing


def derive_loan_status(stored: LoanStatus, due_date: DueDate, now: datetime) -> LoanStatus:
    """
    Effective status of a loan at ``now``.

    A BORROWED loan whose due day is not in the future reads as OVERDUE.
    Pure: nothing is written back.
    """
    if stored == LoanStatus.BORROWED and due_date.date is not None:
        if not due_date.is_after_now(now):
            return LoanStatus.OVERDUE
    return stored


@dataclass(eq=False)
class Loan(Entity):
    """
    Loan of one item to one borrower.

    Business Rules:
    - A loan is created in the RETURNED placeholder state and activated
      by moving it to BORROWED
    - Status only moves along LOAN_TRANSITIONS
    - Reading status derives OVERDUE from the due date; the stored
      status is only promoted by settle_overdue() or an explicit write
    - The lender is always the owner of the borrowed item
    """

    id: ID
    item: Thing
    due_date: DueDate
    borrower_id: ID
    return_location: Location | None = None
    time_returned: datetime | None = None
    reject_reason: str | None = None
    _status: LoanStatus = field(default=LoanStatus.RETURNED, repr=False)

    @property
    def status(self) -> LoanStatus:
        return self.status_at(datetime.now(UTC))

    @status.setter
    def status(self, value: LoanStatus) -> None:
        # Validated against the stored status: every move out of OVERDUE is
        # also legal out of BORROWED.
        result = LOAN_TRANSITIONS.transition(self._status, value)
        if result.is_failure:
            raise result.unwrap_error()
        self._status = result.unwrap()

    @property
    def stored_status(self) -> LoanStatus:
        """The status as last written, without overdue derivation."""
        return self._status

    def status_at(self, now: datetime) -> LoanStatus:
        return derive_loan_status(self._status, self.due_date, now)

    def settle_overdue(self, now: datetime | None = None) -> LoanStatus:
        """Persist a derived OVERDUE status. Idempotent."""
        effective = self.status_at(now or datetime.now(UTC))
        if effective != self._status:
            self.status = effective
        return self._status

    @property
    def lender_id(self) -> ID:
        return self.item.owner_id

    @property
    def active(self) -> bool:
        return self.status == LoanStatus.BORROWED

    @property
    def is_permanent_loan(self) -> bool:
        """
        A loan that does not require a return.

        It is effectively a gift, but legally the item remains the
        library's and the borrower is expected to bring it back when
        they no longer need it.
        """
        return self.due_date.date is None

    @classmethod
    def create(
        cls,
        item: Thing,
        borrower_id: ID,
        due_date: DueDate,
        return_location: Location | None,
    ) -> "Loan":
        """Factory for a new, already active loan."""
        loan = cls(
            id=ID.generate(),
            item=item,
            due_date=due_date,
            borrower_id=borrower_id,
            return_location=return_location,
        )
        loan.status = LoanStatus.BORROWED
        return loan

    @classmethod
    def create_with_id(
        cls,
        id: ID,
        item: Thing,
        due_date: DueDate,
        borrower_id: ID,
        status: LoanStatus,
        return_location: Location | None = None,
        time_returned: datetime | None = None,
    ) -> "Loan":
        """Factory for reconstituting a loan from persistence."""
        return cls(
            id=id,
            item=item,
            due_date=due_date,
            borrower_id=borrower_id,
            return_location=return_location,
            time_returned=time_returned,
            _status=status,
        )
