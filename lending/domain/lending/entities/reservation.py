from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID
from lending.domain.lending.statuses import RESERVATION_TRANSITIONS, ReservationStatus

from .thing import Thing

if TYPE_CHECKING:
    from .borrower import Borrower


@dataclass(eq=False)
class Reservation(Entity):
    """
    A time-boxed hold on an item for the next borrower in line.

    Status only moves along RESERVATION_TRANSITIONS; every other write
    raises InvalidReservationStateTransitionError.
    """

    id: ID
    holder: "Borrower"
    item: Thing
    good_until: datetime
    _status: ReservationStatus = field(default=ReservationStatus.ASSIGNED, repr=False)

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @status.setter
    def status(self, value: ReservationStatus) -> None:
        result = RESERVATION_TRANSITIONS.transition(self._status, value)
        if result.is_failure:
            raise result.unwrap_error()
        self._status = result.unwrap()

    def is_expired_at(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) > self.good_until

    def notify_borrower(self) -> None:
        self.status = ReservationStatus.BORROWER_NOTIFIED

    def mark_borrowed(self) -> None:
        self.status = ReservationStatus.BORROWED

    def expire(self) -> None:
        self.status = ReservationStatus.EXPIRED
