"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- TransitionTable: Static, auditable status state machines
- Result: Explicit success/failure values
"""

from .entity import Entity
from .exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    CurrencyMismatchError,
    DomainError,
    EntityNotFoundError,
    InvalidStateTransitionError,
    MalformedIdError,
    PreconditionFailedError,
    ValidationError,
)
from .result import Failure, Result, Success
from .state_machine import TransitionTable
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "BusinessRuleViolationError",
    "CurrencyMismatchError",
    "DomainError",
    "Entity",
    "EntityNotFoundError",
    "Failure",
    "InvalidStateTransitionError",
    "MalformedIdError",
    "PreconditionFailedError",
    "Result",
    "Success",
    "TransitionTable",
    "ValidationError",
    "ValueObject",
]
