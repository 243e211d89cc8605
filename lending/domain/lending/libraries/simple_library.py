"""
A library that owns and lends its own inventory from one location.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog

from lending.domain.common.value_objects import Location, PhysicalLocation, ThingTitle
from lending.domain.lending.entities.loan import Loan
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.statuses import LoanStatus

from .library import Library

logger = structlog.get_logger(__name__)


@dataclass(eq=False)
class SimpleLibrary(Library):
    """
    Single-site library that is also the lender of every item it holds.

    Items are returned to the library's own location.
    """

    location: PhysicalLocation | None = None
    _items: list[Thing] = field(default_factory=list, repr=False)

    @property
    def all_things(self) -> list[Thing]:
        return list(self._items)

    @property
    def items(self) -> list[Thing]:
        return list(self._items)

    @property
    def all_titles(self) -> list[ThingTitle]:
        return self.get_titles_from_items(self._items)

    @property
    def available_titles(self) -> list[ThingTitle]:
        return self.get_titles_from_items(self.available_things)

    def add_item(self, item: Thing) -> Thing:
        self._items.append(item)
        return item

    def lender_for(self, thing: Thing) -> "SimpleLibrary":
        return self

    # Lender
    @property
    def preferred_return_location(self) -> Location:
        return self.location or PhysicalLocation.empty()

    def start_return(self, loan: Loan, now: datetime | None = None) -> Loan:
        """Accept the item back at the desk and wait on inspection."""
        loan.status = LoanStatus.RETURN_STARTED
        loan.status = LoanStatus.WAITING_ON_LENDER_ACCEPTANCE
        loan.time_returned = now or datetime.now(UTC)
        logger.info("return_started", library_id=str(self.id), loan_id=str(loan.id))
        return loan

    def finish_return(self, loan: Loan) -> Loan:
        if loan.status == LoanStatus.WAITING_ON_LENDER_ACCEPTANCE:
            loan.status = LoanStatus.RETURNED
        return loan
