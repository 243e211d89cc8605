"""
A library that coordinates lending across many independent lenders.
"""

from dataclasses import dataclass, field

import structlog

from lending.domain.common.value_objects import ID, PhysicalArea
from lending.domain.lending.entities.borrower import Borrower, Lender
from lending.domain.lending.entities.loan import Loan
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.exceptions import LenderNotFoundError, LenderNotRegisteredError

from .library import Library

logger = structlog.get_logger(__name__)


@dataclass(eq=False)
class DistributedLibrary(Library):
    """
    Library whose inventory is the union of its lenders' items.

    Every item must be owned by exactly one registered lender. The
    library keeps an item-to-lender index so lookups do not scan every
    lender's inventory.
    """

    area: PhysicalArea | None = None
    _lenders: dict[ID, Lender] = field(default_factory=dict, repr=False)
    _owner_index: dict[ID, ID] = field(default_factory=dict, repr=False)

    @property
    def lenders(self) -> list[Lender]:
        return list(self._lenders.values())

    @property
    def all_things(self) -> list[Thing]:
        return [item for lender in self._lenders.values() for item in lender.items]

    def add_lender(self, lender: Lender) -> Lender:
        self._lenders[lender.id] = lender
        for item in lender.items:
            self._owner_index[item.id] = lender.id
        return lender

    def add_item(self, item: Thing, lender: Lender) -> Thing:
        """
        Register a new item under one of this library's lenders.

        Raises:
            LenderNotRegisteredError: If ``lender`` was never added
        """
        if lender.id not in self._lenders:
            raise LenderNotRegisteredError(lender.id)
        lender.add_item(item)
        self._owner_index[item.id] = lender.id
        return item

    def get_owner_of_item(self, item: Thing) -> Lender:
        """
        Resolve the lender that owns ``item``.

        Falls back to rebuilding the index once, for items lenders added
        directly without going through the library.

        Raises:
            LenderNotFoundError: If no registered lender holds the item
        """
        lender_id = self._owner_index.get(item.id)
        if lender_id is None or lender_id not in self._lenders:
            self._reindex()
            lender_id = self._owner_index.get(item.id)
        if lender_id is None:
            raise LenderNotFoundError(item.title.name)
        return self._lenders[lender_id]

    def lender_for(self, thing: Thing) -> Lender:
        return self.get_owner_of_item(thing)

    def finish_library_return(self, loan: Loan, borrower: Borrower) -> Loan:
        """Close the return, then let the owning lender finish its side."""
        owner = self.get_owner_of_item(loan.item)
        loan = super().finish_library_return(loan, borrower)
        owner.finish_return(loan)
        return loan

    def _reindex(self) -> None:
        self._owner_index = {
            item.id: lender.id for lender in self._lenders.values() for item in lender.items
        }
        logger.debug("owner_index_rebuilt", library_id=str(self.id), items=len(self._owner_index))
