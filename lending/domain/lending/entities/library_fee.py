from dataclasses import dataclass, field

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID, Money
from lending.domain.lending.statuses import FEE_TRANSITIONS, FeeStatus


@dataclass(eq=False)
class LibraryFee(Entity):
    """
    A charge levied by a library against a borrower.

    Created when a return comes back damaged or overdue. Only the status
    changes afterwards.
    """

    id: ID
    library_id: ID
    amount: Money
    charged_for_id: ID
    _status: FeeStatus = field(default=FeeStatus.OUTSTANDING, repr=False)

    @property
    def status(self) -> FeeStatus:
        return self._status

    @status.setter
    def status(self, value: FeeStatus) -> None:
        if value == self._status:
            return
        result = FEE_TRANSITIONS.transition(self._status, value)
        if result.is_failure:
            raise result.unwrap_error()
        self._status = result.unwrap()

    @property
    def is_outstanding(self) -> bool:
        return self._status == FeeStatus.OUTSTANDING

    def mark_paid(self) -> None:
        self.status = FeeStatus.PAID

    def waive(self) -> None:
        self.status = FeeStatus.WAIVED

    @classmethod
    def create(cls, library_id: ID, amount: Money, charged_for_id: ID) -> "LibraryFee":
        return cls(
            id=ID.generate(),
            library_id=library_id,
            amount=amount,
            charged_for_id=charged_for_id,
        )
