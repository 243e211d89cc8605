"""Use case for applying a status change requested by a user."""

from datetime import datetime

import structlog

from lending.application.lending.use_cases.request_borrow_use_case import RequestBorrowUseCase
from lending.domain.common.value_objects import ID
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.exceptions import NotEligibleToRequestError
from lending.domain.lending.statuses import ThingStatus

logger = structlog.get_logger(__name__)


class UpdateThingStatusUseCase:
    def __init__(self, request_borrow_use_case: RequestBorrowUseCase) -> None:
        self.request_borrow_use_case = request_borrow_use_case

    def update_status(
        self,
        thing: Thing,
        user_id: ID,
        new_status: ThingStatus | None,
        now: datetime | None = None,
    ) -> Thing:
        """
        Apply ``new_status`` to ``thing`` on behalf of ``user_id``.

        Non-owners may only ask to borrow. Owners answering a pending
        request approve it (BORROWED), reject it (READY) or reserve the
        item (RESERVED); any other owner change goes through the
        item's validated status setter.

        Raises:
            NotEligibleToRequestError: If a non-owner asks for anything but
                a borrow request
            InvalidThingStateTransitionError: If the change is not allowed
        """
        new_status = new_status or thing.status

        if not thing.is_owned_by(user_id):
            if new_status != ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW:
                raise NotEligibleToRequestError()
            return self.request_borrow_use_case.request_borrow(thing, user_id, now)

        current_status = thing.status
        if current_status == ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW:
            if new_status == ThingStatus.READY:
                thing.reject_borrow_request()
            elif new_status == ThingStatus.BORROWED:
                thing.approve_borrow_request()
            elif new_status == ThingStatus.RESERVED:
                thing.reserve()
        elif new_status != current_status:
            thing.status = new_status

        logger.info(
            "thing_status_updated",
            item_id=str(thing.id),
            user_id=str(user_id),
            from_status=current_status.value,
            to_status=thing.status.value,
        )
        return thing
