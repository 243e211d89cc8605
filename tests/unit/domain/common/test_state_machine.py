"""Tests for TransitionTable and Result."""

from enum import Enum

import pytest

from lending.domain.common import Failure, InvalidStateTransitionError, Success, TransitionTable


class Light(str, Enum):
    RED = "RED"
    GREEN = "GREEN"
    AMBER = "AMBER"


@pytest.fixture
def table() -> TransitionTable[Light]:
    return TransitionTable(
        "light",
        {
            Light.RED: frozenset({Light.GREEN}),
            Light.GREEN: frozenset({Light.AMBER}),
            Light.AMBER: frozenset({Light.RED}),
        },
    )


class TestTransitionTable:
    def test_legal_transition_returns_success(self, table: TransitionTable[Light]) -> None:
        result = table.transition(Light.RED, Light.GREEN)
        assert isinstance(result, Success)
        assert result.unwrap() is Light.GREEN

    def test_illegal_transition_returns_failure(self, table: TransitionTable[Light]) -> None:
        result = table.transition(Light.RED, Light.AMBER)
        assert isinstance(result, Failure)
        error = result.unwrap_error()
        assert isinstance(error, InvalidStateTransitionError)
        assert error.current_status is Light.RED
        assert error.new_status is Light.AMBER
        assert "Current status: RED, New status: AMBER" in error.message

    def test_error_factory_is_used(self) -> None:
        class LightError(InvalidStateTransitionError):
            def __init__(self, current: Light, new: Light) -> None:
                super().__init__("light", current, new, message="no")

        table = TransitionTable("light", {Light.RED: frozenset()}, LightError)
        assert isinstance(table.transition(Light.RED, Light.GREEN).unwrap_error(), LightError)

    def test_iteration_yields_every_pair(self, table: TransitionTable[Light]) -> None:
        assert set(table) == {
            (Light.RED, Light.GREEN),
            (Light.GREEN, Light.AMBER),
            (Light.AMBER, Light.RED),
        }
        assert (Light.RED, Light.GREEN) in table
        assert (Light.GREEN, Light.RED) not in table

    def test_unknown_state_is_terminal(self) -> None:
        table = TransitionTable("light", {Light.RED: frozenset({Light.GREEN})})
        assert table.is_terminal(Light.GREEN)
        assert table.allowed_from(Light.AMBER) == frozenset()

    def test_as_names(self, table: TransitionTable[Light]) -> None:
        assert table.as_names()["RED"] == {"GREEN"}


class TestResult:
    def test_success_value_or_and_map(self) -> None:
        assert Success(2).map(lambda v: v * 2).unwrap() == 4
        assert Success(2).value_or(5) == 2

    def test_failure_value_or_and_map(self) -> None:
        failure = Failure("boom")
        assert failure.value_or(5) == 5
        assert failure.map(lambda v: v) is failure
        with pytest.raises(ValueError):
            failure.unwrap()
