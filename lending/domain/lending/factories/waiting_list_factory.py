from typing import Protocol

from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.entities.waiting_list import (
    FirstComeFirstServeWaitingList,
    NullWaitingList,
    WaitingList,
)
from lending.domain.lending.exceptions import InvalidLibraryConfigurationError
from lending.domain.lending.statuses import WaitingListType


class HasWaitingListType(Protocol):
    waiting_list_type: WaitingListType


class WaitingListFactory:
    """Creates the waiting list variant a library is configured for."""

    def __init__(self, reservation_days: int = 3) -> None:
        self.reservation_days = reservation_days

    def create_new_list(self, library: HasWaitingListType, item: Thing) -> WaitingList:
        if library.waiting_list_type == WaitingListType.NONE:
            return NullWaitingList(item=item)
        if library.waiting_list_type == WaitingListType.FIRST_COME_FIRST_SERVE:
            return FirstComeFirstServeWaitingList(
                item=item, reservation_days=self.reservation_days
            )
        raise InvalidLibraryConfigurationError(
            f"Can't handle waiting list type {library.waiting_list_type}"
        )
