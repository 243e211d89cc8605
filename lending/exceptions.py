"""Boundary exception for callers of the lending core."""

from lending.domain.common.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvalidStateTransitionError,
    PreconditionFailedError,
    ValidationError,
)
from lending.domain.lending.exceptions import (
    BorrowRequestCooldownError,
    InvalidLibraryConfigurationError,
)


class LendingError(Exception):
    """Base exception for all errors surfaced to callers of the lending core."""

    def __init__(self, message: str, status_code: int = 500, details: dict | None = None) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


def status_code_for(error: DomainError) -> int:
    """HTTP-style status code for a domain error, most specific class first."""
    if isinstance(error, BorrowRequestCooldownError):
        return 429
    if isinstance(error, InvalidLibraryConfigurationError):
        return 500
    if isinstance(error, EntityNotFoundError):
        return 404
    if isinstance(error, InvalidStateTransitionError):
        return 409
    if isinstance(error, (AuthorizationError, BusinessRuleViolationError)):
        return 403
    if isinstance(error, (ValidationError, PreconditionFailedError)):
        return 400
    return 500


def to_lending_error(error: DomainError) -> LendingError:
    """Translate a domain error into the boundary error, keeping message and details."""
    details = dict(error.details)
    if isinstance(error, BorrowRequestCooldownError):
        details.setdefault("retry_after_seconds", error.retry_after_seconds)
    return LendingError(error.message, status_code=status_code_for(error), details=details)
