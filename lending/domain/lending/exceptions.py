"""Lending module domain exceptions."""

from lending.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvalidStateTransitionError,
    PreconditionFailedError,
)


class InvalidThingStateTransitionError(InvalidStateTransitionError):
    """Raised when an item's status change is not in the thing table."""

    def __init__(self, current_status: object, new_status: object) -> None:
        super().__init__("thing", current_status, new_status)


class InvalidLoanStateTransitionError(InvalidStateTransitionError):
    """Raised when a loan's status change is not in the loan table."""

    def __init__(self, current_status: object, new_status: object) -> None:
        old = getattr(current_status, "value", current_status)
        new = getattr(new_status, "value", new_status)
        super().__init__(
            "loan",
            current_status,
            new_status,
            message=f"Cannot change loan status from '{old}' to '{new}'.",
        )


class InvalidReservationStateTransitionError(InvalidStateTransitionError):
    """Raised when a reservation's status change is not in the reservation table."""

    def __init__(self, current_status: object, new_status: object) -> None:
        super().__init__("reservation", current_status, new_status)


class InvalidFeeStateTransitionError(InvalidStateTransitionError):
    """Raised when a fee's status change is not in the fee table."""

    def __init__(self, current_status: object, new_status: object) -> None:
        super().__init__("fee", current_status, new_status)


class InvalidThingStatusToBorrowError(PreconditionFailedError):
    """Raised when borrowing an item that is not READY."""

    def __init__(self, status: object) -> None:
        status_name = getattr(status, "value", status)
        super().__init__(
            f"Item cannot be borrowed while {status_name}", {"status": status_name}
        )
        self.status = status


class ReturnNotStartedError(PreconditionFailedError):
    """Raised when finishing a return that is not waiting on the lender."""

    def __init__(self, message: str = "Return not started") -> None:
        super().__init__(message)


class ReservationAlreadyExistsError(PreconditionFailedError):
    """Raised when reserving an item that already holds a reservation."""

    def __init__(self) -> None:
        super().__init__("This item already has a reservation, please remove that first")


class NoBorrowerWaitingError(PreconditionFailedError):
    """Raised when reserving an item nobody is waiting for."""

    def __init__(self) -> None:
        super().__init__("No borrower is waiting for this item!")


class EntityNotAssignedIdError(PreconditionFailedError):
    """Raised when an entity is used as a key before it has an id."""

    def __init__(self, message: str = "Entity not assigned ID") -> None:
        super().__init__(message)


class LenderNotFoundError(PreconditionFailedError):
    """Raised when no registered lender owns an item."""

    def __init__(self, title_name: str) -> None:
        super().__init__(f"Cannot find an owner for {title_name}")
        self.title_name = title_name


class LenderNotRegisteredError(EntityNotFoundError):
    """Raised when adding an item through a lender the library does not know."""

    def __init__(self, lender_id: object) -> None:
        super().__init__("Lender", lender_id)


class InvalidLibraryConfigurationError(DomainError):
    """Raised when a library is configured with unsupported options."""

    def __init__(self, message: str = "Invalid library configuration") -> None:
        super().__init__(message)


class BorrowerNotInGoodStandingError(BusinessRuleViolationError):
    """Raised when a borrower is not a member or owes too much."""

    def __init__(self, message: str = "Borrower not in good standing") -> None:
        super().__init__("borrower_in_good_standing", message)


class CannotBorrowOwnItemError(BusinessRuleViolationError):
    """Raised when an owner requests to borrow their own item."""

    def __init__(self) -> None:
        super().__init__("not_own_item", "You cannot borrow your own item")


class NotEligibleToRequestError(BusinessRuleViolationError):
    """Raised when a non-owner attempts anything but a borrow request."""

    def __init__(
        self, message: str = "You can only request to borrow items that are available"
    ) -> None:
        super().__init__("request_eligibility", message)


class BorrowRequestCooldownError(BusinessRuleViolationError):
    """Raised when a user repeats a borrow request inside the cooldown window."""

    def __init__(self, retry_after_seconds: int) -> None:
        minutes = max(1, -(-retry_after_seconds // 60))
        super().__init__(
            "borrow_request_cooldown",
            f"You already requested this item. Please wait {minutes} minute(s) before trying again",
        )
        self.retry_after_seconds = retry_after_seconds
