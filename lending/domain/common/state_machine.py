"""
Transition tables for status state machines.

Every status-carrying entity in the lending model (Thing, Loan,
Reservation, LibraryFee) keeps its legal moves in a static adjacency map
from current state to the set of states it may move to. The table is
plain data so it can be audited and tested without the entity, and
``transition`` is a pure function of (current, target).

Example:
    TABLE = TransitionTable(
        "loan",
        {
            LoanStatus.RETURNED: frozenset({LoanStatus.BORROWED}),
            LoanStatus.BORROWED: frozenset({LoanStatus.RETURN_STARTED}),
        },
    )
    TABLE.transition(LoanStatus.RETURNED, LoanStatus.BORROWED)  # Success(BORROWED)
"""

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from typing import Generic, TypeVar

from .exceptions import InvalidStateTransitionError
from .result import Failure, Result, Success

S = TypeVar("S", bound=Enum)

ErrorFactory = Callable[[S, S], InvalidStateTransitionError]


class TransitionTable(Generic[S]):
    """An immutable adjacency map of legal status changes."""

    def __init__(
        self,
        machine: str,
        transitions: Mapping[S, frozenset[S]],
        error_factory: ErrorFactory[S] | None = None,
    ) -> None:
        self.machine = machine
        self._transitions: dict[S, frozenset[S]] = {
            state: frozenset(targets) for state, targets in transitions.items()
        }
        self._error_factory = error_factory

    def __iter__(self) -> Iterator[tuple[S, S]]:
        """Iterate every legal (current, target) pair."""
        for state, targets in self._transitions.items():
            for target in targets:
                yield state, target

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.can_transition(pair[0], pair[1])

    @property
    def states(self) -> frozenset[S]:
        return frozenset(self._transitions)

    def allowed_from(self, current: S) -> frozenset[S]:
        """Return the states reachable in one step from ``current``."""
        return self._transitions.get(current, frozenset())

    def can_transition(self, current: S, target: S) -> bool:
        return target in self.allowed_from(current)

    def is_terminal(self, state: S) -> bool:
        return not self.allowed_from(state)

    def transition(self, current: S, target: S) -> Result[S, InvalidStateTransitionError]:
        """
        Check a single status change.

        Returns:
            Success carrying the new state, or Failure carrying the typed
            error the owning entity raises.
        """
        if self.can_transition(current, target):
            return Success(target)
        return Failure(self._error(current, target))

    def as_names(self) -> dict[str, set[str]]:
        """Serialize the table as state name -> set of next state names."""
        return {
            state.value: {target.value for target in targets}
            for state, targets in self._transitions.items()
        }

    def _error(self, current: S, target: S) -> InvalidStateTransitionError:
        if self._error_factory is not None:
            return self._error_factory(current, target)
        return InvalidStateTransitionError(self.machine, current, target)
