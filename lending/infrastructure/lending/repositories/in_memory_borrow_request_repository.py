"""Repository for borrow requests, kept in process memory."""

from lending.application.lending.protocols.borrow_request_repository import BorrowRequest
from lending.domain.common.value_objects import ID


class InMemoryBorrowRequestRepository:
    """Keeps every borrow request; lookups return the most recent per user and item."""

    def __init__(self) -> None:
        self._requests: list[BorrowRequest] = []

    def find_latest(self, item_id: ID, user_id: ID) -> BorrowRequest | None:
        matching = [
            request
            for request in self._requests
            if request.item_id == item_id and request.requested_by == user_id
        ]
        if not matching:
            return None
        return max(matching, key=lambda request: request.requested_at)

    def save(self, request: BorrowRequest) -> BorrowRequest:
        self._requests.append(request)
        return request
