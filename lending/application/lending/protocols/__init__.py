from .borrow_request_repository import BorrowRequest, BorrowRequestRepositoryProtocol

__all__ = ["BorrowRequest", "BorrowRequestRepositoryProtocol"]
