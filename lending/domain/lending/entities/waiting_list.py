"""
Waiting lists: per-item queues that serialize access once an item
comes back from a loan.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import ClassVar, Self

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID
from lending.domain.lending.exceptions import (
    NoBorrowerWaitingError,
    ReservationAlreadyExistsError,
)
from lending.domain.lending.statuses import (
    ReservationStatus,
    ThingStatus,
    WaitingListType,
)

from .borrower import Borrower
from .reservation import Reservation
from .thing import Thing


@dataclass(eq=False)
class WaitingList(Entity):
    """
    Queue of borrowers for exactly one item.

    Holds at most one current reservation. A new reservation can only be
    made once the current one has been cleared.
    """

    item: Thing
    id: ID = field(default_factory=ID.generate)
    current_reservation: Reservation | None = None
    expired_reservations: list[Reservation] = field(default_factory=list)

    waiting_list_type: ClassVar[WaitingListType]

    @abstractmethod
    def add(self, borrower: Borrower) -> Self: ...

    @abstractmethod
    def find_next_borrower(self) -> Borrower | None: ...

    @abstractmethod
    def is_on_list(self, borrower: Borrower) -> bool: ...

    @abstractmethod
    def cancel(self, borrower: Borrower) -> Self: ...

    @abstractmethod
    def get_reservation_time(self) -> timedelta: ...

    def clear_current_reservation(self) -> None:
        self.current_reservation = None

    def process_reservation_expired(self, reservation: Reservation) -> Self:
        """
        Close out a reservation whose hold ran out.

        The reservation is walked through BORROWER_NOTIFIED to EXPIRED,
        kept in the expired history, and the list is freed for the next
        reservation cycle.
        """
        if reservation.status == ReservationStatus.ASSIGNED:
            reservation.notify_borrower()
        reservation.expire()
        self.expired_reservations.append(reservation)
        if self.current_reservation == reservation:
            self.clear_current_reservation()
        return self

    def reserve_item_for_next_borrower(self, now: datetime | None = None) -> Reservation:
        """
        Hold the item for the borrower at the front of the queue.

        Raises:
            ReservationAlreadyExistsError: If a reservation is still current
            NoBorrowerWaitingError: If nobody is waiting
        """
        if self.current_reservation is not None:
            raise ReservationAlreadyExistsError()
        next_borrower = self.find_next_borrower()
        if next_borrower is None:
            raise NoBorrowerWaitingError()

        good_until = (now or datetime.now(UTC)) + self.get_reservation_time()
        self.item.status = ThingStatus.RESERVED

        reservation = Reservation(
            id=ID.generate(),
            holder=next_borrower,
            item=self.item,
            good_until=good_until,
        )
        self.cancel(next_borrower)
        self.current_reservation = reservation
        return reservation


@dataclass(eq=False)
class FirstComeFirstServeWaitingList(WaitingList):
    """Serves borrowers strictly in the order they joined."""

    members: list[Borrower] = field(default_factory=list)
    reservation_days: int = 3

    waiting_list_type: ClassVar[WaitingListType] = WaitingListType.FIRST_COME_FIRST_SERVE

    def add(self, borrower: Borrower) -> Self:
        self.members.append(borrower)
        return self

    def is_on_list(self, borrower: Borrower) -> bool:
        return any(member.id == borrower.id for member in self.members)

    def find_next_borrower(self) -> Borrower | None:
        if not self.members:
            return None
        return self.members[0]

    def cancel(self, borrower: Borrower) -> Self:
        self.members = [member for member in self.members if member.id != borrower.id]
        return self

    def get_reservation_time(self) -> timedelta:
        return timedelta(days=self.reservation_days)


@dataclass(eq=False)
class NullWaitingList(WaitingList):
    """Used by libraries that do not support waiting: always empty."""

    waiting_list_type: ClassVar[WaitingListType] = WaitingListType.NONE

    def add(self, borrower: Borrower) -> Self:
        return self

    def is_on_list(self, borrower: Borrower) -> bool:
        return False

    def find_next_borrower(self) -> Borrower | None:
        return None

    def cancel(self, borrower: Borrower) -> Self:
        return self

    def get_reservation_time(self) -> timedelta:
        return timedelta(0)

    def process_reservation_expired(self, reservation: Reservation) -> Self:
        return self
