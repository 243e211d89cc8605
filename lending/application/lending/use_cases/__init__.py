from .request_borrow_use_case import RequestBorrowUseCase
from .update_thing_status_use_case import UpdateThingStatusUseCase

__all__ = ["RequestBorrowUseCase", "UpdateThingStatusUseCase"]
