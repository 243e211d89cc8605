from .in_memory_borrow_request_repository import InMemoryBorrowRequestRepository

__all__ = ["InMemoryBorrowRequestRepository"]
