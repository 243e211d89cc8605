from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from lending.domain.common.value_objects import ID


@dataclass(frozen=True)
class BorrowRequest:
    item_id: ID
    requested_by: ID
    requested_at: datetime


class BorrowRequestRepositoryProtocol(Protocol):
    def find_latest(self, item_id: ID, user_id: ID) -> BorrowRequest | None: ...

    def save(self, request: BorrowRequest) -> BorrowRequest: ...
