"""
Library base: the borrow and return protocols shared by every library kind.
"""

from abc import abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import structlog

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID, URL, DueDate, Money, MOPServer, ThingTitle
from lending.domain.lending.entities.borrower import Borrower, Lender
from lending.domain.lending.entities.library_fee import LibraryFee
from lending.domain.lending.entities.loan import Loan
from lending.domain.lending.entities.person import Person
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.entities.waiting_list import WaitingList
from lending.domain.lending.exceptions import (
    BorrowerNotInGoodStandingError,
    InvalidThingStatusToBorrowError,
    ReturnNotStartedError,
)
from lending.domain.lending.factories.money_factory import MoneyFactory
from lending.domain.lending.factories.waiting_list_factory import WaitingListFactory
from lending.domain.lending.fee_schedules import FeeSchedule
from lending.domain.lending.statuses import (
    LoanStatus,
    ReservationStatus,
    ThingStatus,
    WaitingListType,
)

logger = structlog.get_logger(__name__)


@dataclass(eq=False)
class Library(Entity):
    """
    A library mediates borrowing of things on behalf of one or more lenders.

    Subclasses say where items live (``all_things``) and which lender owns
    a given item (``lender_for``); everything else in the borrow and
    return protocols is shared.

    Business Rules:
    - Only members whose outstanding fees do not exceed
      ``max_fines_before_suspension`` may borrow
    - Only READY items may be borrowed, except that the holder of the
      current reservation may borrow a RESERVED item
    - A return must be started before the library can finish it
    - Fees are only charged on finish, for damaged or overdue returns
    """

    id: ID
    name: str
    waiting_list_type: WaitingListType
    max_fines_before_suspension: Money
    fee_schedule: FeeSchedule
    default_loan_time: timedelta = timedelta(days=14)
    administrator: Person | None = None
    public_url: URL | None = None
    mop_server: MOPServer = field(default_factory=MOPServer.localhost)
    money_factory: MoneyFactory = field(default_factory=MoneyFactory)
    waiting_list_factory: WaitingListFactory = field(default_factory=WaitingListFactory)
    _borrowers: list[Borrower] = field(default_factory=list, repr=False)
    _loans: list[Loan] = field(default_factory=list, repr=False)
    _waiting_lists: dict[ID, WaitingList] = field(default_factory=dict, repr=False)

    # Inventory
    @property
    @abstractmethod
    def all_things(self) -> list[Thing]: ...

    @abstractmethod
    def lender_for(self, thing: Thing) -> Lender:
        """Return the lender that owns ``thing``."""

    @property
    def available_things(self) -> list[Thing]:
        return [thing for thing in self.all_things if thing.status == ThingStatus.READY]

    @staticmethod
    def get_titles_from_items(items: Iterable[Thing]) -> list[ThingTitle]:
        """Distinct titles in first-seen order, using ThingTitle's loose equality."""
        titles: list[ThingTitle] = []
        for item in items:
            if item.title not in titles:
                titles.append(item.title)
        return titles

    # Membership
    @property
    def borrowers(self) -> list[Borrower]:
        return list(self._borrowers)

    def add_borrower(self, borrower: Borrower) -> Borrower:
        self._borrowers.append(borrower)
        return borrower

    @property
    def loans(self) -> list[Loan]:
        return list(self._loans)

    def add_loan(self, loan: Loan) -> None:
        self._loans.append(loan)

    def can_borrow(self, borrower: Borrower) -> bool:
        """
        A borrower may borrow when they belong to this library and their
        outstanding fees do not exceed the suspension threshold.

        Raises:
            CurrencyMismatchError: If any outstanding fee is in another
                currency than the threshold
        """
        if borrower.library_id is None or borrower.library_id != self.id:
            return False
        outstanding = [fee.amount for fee in borrower.fees if fee.is_outstanding]
        total = self.money_factory.total(
            outstanding, currency=self.max_fines_before_suspension.currency
        )
        return total <= self.max_fines_before_suspension

    # Borrowing
    def start_borrow(self, thing: Thing, borrower: Borrower) -> Thing:
        """Pre-approval hook; checks the item and the borrower."""
        self._ensure_can_lend(thing, borrower)
        return thing

    def finish_borrow(
        self,
        thing: Thing,
        borrower: Borrower,
        until: DueDate | None = None,
        now: datetime | None = None,
    ) -> Loan:
        """
        Hand the item over and open a loan.

        Without ``until`` the loan is due ``default_loan_time`` from now.
        The return location is the owning lender's preferred one.
        """
        self._ensure_can_lend(thing, borrower)
        lender = self.lender_for(thing)
        if until is None:
            until = DueDate((now or datetime.now(UTC)) + self.default_loan_time)

        self._consume_reservation(thing, borrower)
        thing.status = ThingStatus.BORROWED
        loan = Loan.create(
            item=thing,
            borrower_id=borrower.id,
            due_date=until,
            return_location=lender.preferred_return_location,
        )
        self.add_loan(loan)

        logger.info(
            "loan_created",
            library_id=str(self.id),
            loan_id=str(loan.id),
            item_id=str(thing.id),
            borrower_id=str(borrower.id),
            lender_id=str(lender.id),
            permanent=loan.is_permanent_loan,
        )
        return loan

    def borrow(self, thing: Thing, borrower: Borrower, until: DueDate | None = None) -> Loan:
        """Run start_borrow and finish_borrow back to back."""
        approved = self.start_borrow(thing, borrower)
        return self.finish_borrow(approved, borrower, until)

    # Returning
    def start_return(self, loan: Loan, now: datetime | None = None) -> Loan:
        """Let the owning lender start the return, then wait on its acceptance."""
        lender = self.lender_for(loan.item)
        loan = lender.start_return(loan)

        if loan.status in (LoanStatus.BORROWED, LoanStatus.OVERDUE):
            loan.status = LoanStatus.RETURN_STARTED
        if loan.status != LoanStatus.WAITING_ON_LENDER_ACCEPTANCE:
            loan.status = LoanStatus.WAITING_ON_LENDER_ACCEPTANCE
        loan.time_returned = now or datetime.now(UTC)

        logger.info("return_started", library_id=str(self.id), loan_id=str(loan.id))
        return loan

    def reject_return(self, loan: Loan, reason: str) -> Loan:
        loan.status = LoanStatus.RETURNED_DAMAGED
        loan.reject_reason = reason
        logger.info(
            "return_rejected", library_id=str(self.id), loan_id=str(loan.id), reason=reason
        )
        return loan

    def finish_library_return(self, loan: Loan, borrower: Borrower) -> Loan:
        """
        Close out a started return.

        Resolves the final loan status, charges any fee, hands the item to
        the next borrower on its waiting list, and otherwise makes it
        available again.

        Raises:
            ReturnNotStartedError: If the loan is not waiting on the lender
                or was never stamped with a return time
        """
        if loan.status != LoanStatus.WAITING_ON_LENDER_ACCEPTANCE or loan.time_returned is None:
            raise ReturnNotStartedError()

        item = loan.item
        if item.status == ThingStatus.DAMAGED:
            loan.status = LoanStatus.RETURNED_DAMAGED
        elif loan.due_date.date is not None and loan.due_date < loan.time_returned:
            loan.status = LoanStatus.OVERDUE
        else:
            loan.status = LoanStatus.RETURNED

        self._assess_fee(loan, borrower)
        self._promote_next_borrower(item)

        if item.status == ThingStatus.BORROWED:
            item.status = ThingStatus.READY

        logger.info(
            "return_finished",
            library_id=str(self.id),
            loan_id=str(loan.id),
            loan_status=loan.status.value,
            item_status=item.status.value,
        )
        return loan

    # Waiting lists
    def reserve_item(self, item: Thing, borrower: Borrower) -> WaitingList:
        """Put ``borrower`` in line for ``item``, creating its waiting list on first use."""
        waiting_list = self._waiting_lists.get(item.id)
        if waiting_list is None:
            waiting_list = self.waiting_list_factory.create_new_list(self, item)
            self._waiting_lists[item.id] = waiting_list
        waiting_list.add(borrower)
        logger.info(
            "borrower_waitlisted",
            library_id=str(self.id),
            item_id=str(item.id),
            borrower_id=str(borrower.id),
        )
        return waiting_list

    def waiting_list_for(self, item: Thing) -> WaitingList | None:
        return self._waiting_lists.get(item.id)

    # Internals
    def _ensure_can_lend(self, thing: Thing, borrower: Borrower) -> None:
        if thing.status == ThingStatus.RESERVED and self._holds_reservation(thing, borrower):
            pass
        elif thing.status != ThingStatus.READY:
            raise InvalidThingStatusToBorrowError(thing.status)
        if not self.can_borrow(borrower):
            raise BorrowerNotInGoodStandingError()

    def _holds_reservation(self, thing: Thing, borrower: Borrower) -> bool:
        waiting_list = self._waiting_lists.get(thing.id)
        if waiting_list is None or waiting_list.current_reservation is None:
            return False
        return waiting_list.current_reservation.holder.id == borrower.id

    def _consume_reservation(self, thing: Thing, borrower: Borrower) -> None:
        if not self._holds_reservation(thing, borrower):
            return
        waiting_list = self._waiting_lists[thing.id]
        reservation = waiting_list.current_reservation
        assert reservation is not None
        if reservation.status == ReservationStatus.ASSIGNED:
            reservation.notify_borrower()
        reservation.mark_borrowed()
        waiting_list.clear_current_reservation()

    def _assess_fee(self, loan: Loan, borrower: Borrower) -> None:
        # Damage is checked first; a damaged return never resolves to OVERDUE
        fee_amount: Money | None = None
        if loan.item.status == ThingStatus.DAMAGED:
            fee_amount = self.fee_schedule.fee_for_damaged_item(loan)
        if loan.status == LoanStatus.OVERDUE:
            fee_amount = self.fee_schedule.fee_for_overdue_item(loan)

        if fee_amount is None:
            return
        fee = LibraryFee.create(library_id=self.id, amount=fee_amount, charged_for_id=loan.id)
        borrower.apply_fee(fee)
        logger.info(
            "fee_applied",
            library_id=str(self.id),
            loan_id=str(loan.id),
            borrower_id=str(borrower.id),
            amount=str(fee_amount.amount),
            currency=fee_amount.currency.value,
        )

    def _promote_next_borrower(self, item: Thing) -> None:
        waiting_list = self._waiting_lists.get(item.id)
        if waiting_list is None or item.status == ThingStatus.DAMAGED:
            return
        if waiting_list.current_reservation is not None:
            logger.warning(
                "reservation_still_current",
                item_id=str(item.id),
                reservation_id=str(waiting_list.current_reservation.id),
            )
            return
        if waiting_list.find_next_borrower() is None:
            return
        reservation = waiting_list.reserve_item_for_next_borrower()
        logger.info(
            "item_reserved_for_next_borrower",
            item_id=str(item.id),
            reservation_id=str(reservation.id),
            holder_id=str(reservation.holder.id),
        )
