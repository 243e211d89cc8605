"""Use case for requesting to borrow an item."""

import math
from datetime import UTC, datetime, timedelta

import structlog

from lending.application.lending.protocols.borrow_request_repository import (
    BorrowRequest,
    BorrowRequestRepositoryProtocol,
)
from lending.domain.common.value_objects import ID
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.exceptions import BorrowRequestCooldownError

logger = structlog.get_logger(__name__)


class RequestBorrowUseCase:
    def __init__(
        self,
        borrow_request_repository: BorrowRequestRepositoryProtocol,
        cooldown: timedelta = timedelta(hours=1),
    ) -> None:
        self.borrow_request_repository = borrow_request_repository
        self.cooldown = cooldown

    def request_borrow(self, thing: Thing, requester_id: ID, now: datetime | None = None) -> Thing:
        """
        Ask the owner of ``thing`` to lend it to ``requester_id``.

        Args:
            thing: Item being requested
            requester_id: ID of the user asking to borrow
            now: Request time, defaults to the current UTC time

        Returns:
            The item, now waiting for the lender's approval

        Raises:
            BorrowRequestCooldownError: If the same user requested the same
                item less than ``cooldown`` ago
            CannotBorrowOwnItemError: If the requester owns the item
            InvalidThingStatusToBorrowError: If the item is not READY
        """
        now = now or datetime.now(UTC)

        latest = self.borrow_request_repository.find_latest(thing.id, requester_id)
        if latest is not None:
            elapsed = now - latest.requested_at
            if elapsed < self.cooldown:
                retry_after = math.ceil((self.cooldown - elapsed).total_seconds())
                logger.info(
                    "borrow_request_throttled",
                    item_id=str(thing.id),
                    requester_id=str(requester_id),
                    retry_after_seconds=retry_after,
                )
                raise BorrowRequestCooldownError(retry_after)

        thing.request_borrow(requester_id)
        self.borrow_request_repository.save(
            BorrowRequest(item_id=thing.id, requested_by=requester_id, requested_at=now)
        )

        logger.info(
            "borrow_requested",
            item_id=str(thing.id),
            requester_id=str(requester_id),
            owner_id=str(thing.owner_id),
        )
        return thing
