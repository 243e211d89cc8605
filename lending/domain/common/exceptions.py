"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
The domain never catches them; they should be caught and translated
to appropriate responses by the calling layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Malformed identifier, negative distance, empty name.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class MalformedIdError(ValidationError):
    """Raised when an identifier string is not a valid UUID."""

    def __init__(self, value: object) -> None:
        super().__init__("Invalid UUID", field="id", value=value)


class CurrencyMismatchError(DomainError):
    """
    Raised when a money operation mixes currencies.

    Always a programming error: totals and comparisons are only
    meaningful inside a single currency.
    """

    def __init__(self, message: str = "Currency mismatch") -> None:
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a lender that is not registered with a library.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: A borrower with too many outstanding fees asking to borrow.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class PreconditionFailedError(DomainError):
    """
    Raised when an operation is attempted out of order.

    Example: Finishing a return that was never started.
    """


class InvalidStateTransitionError(DomainError):
    """
    Raised when a status change is not listed in a transition table.

    Carries the machine name and both states so the caller can report
    exactly which change was refused.
    """

    def __init__(
        self,
        machine: str,
        current_status: object,
        new_status: object,
        message: str | None = None,
    ) -> None:
        msg = message or (
            f"Invalid {machine} state transition. "
            f"Current status: {_status_name(current_status)}, "
            f"New status: {_status_name(new_status)}"
        )
        super().__init__(msg)
        self.machine = machine
        self.current_status = current_status
        self.new_status = new_status


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: A user other than the owner approving a borrow request.
    """

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)


def _status_name(status: object) -> str:
    return str(getattr(status, "value", status))
