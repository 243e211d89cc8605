"""
Thing entity: a physical item offered to the community.
"""

from dataclasses import dataclass, field

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID, Location, Money, ThingTitle
from lending.domain.lending.exceptions import (
    CannotBorrowOwnItemError,
    InvalidThingStatusToBorrowError,
    InvalidThingStateTransitionError,
)
from lending.domain.lending.statuses import THING_TRANSITIONS, ThingStatus


@dataclass(eq=False)
class Thing(Entity):
    """
    A shareable item.

    Business Rules:
    - A new item starts READY
    - Status only moves along THING_TRANSITIONS; writing the current
      status again is a no-op
    - The owner cannot request to borrow their own item
    - Borrow requests are only accepted while READY, and approval or
      rejection only while a request is pending
    """

    id: ID
    title: ThingTitle
    owner_id: ID
    storage_location: Location
    description: str | None = None
    image_urls: list[str] = field(default_factory=list)
    purchase_cost: Money | None = None
    requested_to_borrow_by: ID | None = None
    _status: ThingStatus = field(default=ThingStatus.READY, repr=False)

    @property
    def status(self) -> ThingStatus:
        return self._status

    @status.setter
    def status(self, value: ThingStatus) -> None:
        if value == self._status:
            return
        result = THING_TRANSITIONS.transition(self._status, value)
        if result.is_failure:
            raise result.unwrap_error()
        self._status = result.unwrap()

    # Query methods
    def is_owned_by(self, user_id: ID) -> bool:
        return self.owner_id == user_id

    @property
    def is_available(self) -> bool:
        return self._status == ThingStatus.READY

    # Command methods
    def request_borrow(self, requester_id: ID) -> None:
        """
        Record a request to borrow this item.

        Raises:
            CannotBorrowOwnItemError: If the requester owns the item
            InvalidThingStatusToBorrowError: If the item is not READY
        """
        if self.is_owned_by(requester_id):
            raise CannotBorrowOwnItemError()
        if self._status != ThingStatus.READY:
            raise InvalidThingStatusToBorrowError(self._status)
        self.status = ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW
        self.requested_to_borrow_by = requester_id

    def approve_borrow_request(self) -> None:
        self._require_pending_request(ThingStatus.BORROWED)
        self.status = ThingStatus.BORROWED

    def reject_borrow_request(self) -> None:
        self._require_pending_request(ThingStatus.READY)
        self.status = ThingStatus.READY
        self.requested_to_borrow_by = None

    def reserve(self) -> None:
        self.status = ThingStatus.RESERVED

    def mark_ready(self) -> None:
        self.status = ThingStatus.READY

    def mark_damaged(self) -> None:
        self.status = ThingStatus.DAMAGED

    def _require_pending_request(self, target: ThingStatus) -> None:
        if self._status != ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW:
            raise InvalidThingStateTransitionError(self._status, target)

    # Factory methods
    @classmethod
    def create(
        cls,
        title: ThingTitle,
        owner_id: ID,
        storage_location: Location,
        description: str | None = None,
        image_urls: list[str] | None = None,
        purchase_cost: Money | None = None,
    ) -> "Thing":
        """Factory for an item newly offered by its owner."""
        return cls(
            id=ID.generate(),
            title=title,
            owner_id=owner_id,
            storage_location=storage_location,
            description=description.strip() if description else None,
            image_urls=list(image_urls or []),
            purchase_cost=purchase_cost,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ID,
        title: ThingTitle,
        owner_id: ID,
        storage_location: Location,
        status: ThingStatus = ThingStatus.READY,
        description: str | None = None,
        image_urls: list[str] | None = None,
        purchase_cost: Money | None = None,
        requested_to_borrow_by: ID | None = None,
    ) -> "Thing":
        """Factory for reconstituting an item from persistence."""
        return cls(
            id=id,
            title=title,
            owner_id=owner_id,
            storage_location=storage_location,
            description=description,
            image_urls=list(image_urls or []),
            purchase_cost=purchase_cost,
            requested_to_borrow_by=requested_to_borrow_by,
            _status=status,
        )
