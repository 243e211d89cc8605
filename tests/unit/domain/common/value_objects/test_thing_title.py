"""Tests for ThingTitle value object."""

import pytest

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ThingTitle


class TestThingTitle:
    def test_empty_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThingTitle(name="  ")

    def test_identifier_on_one_side_does_not_break_equality(self) -> None:
        assert ThingTitle(name="Ladder", upc="012345") == ThingTitle(name="Ladder")

    def test_conflicting_identifiers_break_equality(self) -> None:
        assert ThingTitle(name="Ladder", isbn="1") != ThingTitle(name="Ladder", isbn="2")

    def test_name_must_match(self) -> None:
        assert ThingTitle(name="Ladder") != ThingTitle(name="Step Ladder")

    def test_equal_titles_hash_equally(self) -> None:
        assert hash(ThingTitle(name="Ladder", upc="1")) == hash(ThingTitle(name="Ladder"))

    def test_hash_normalizes_name(self) -> None:
        assert hash(ThingTitle(name="Step_Ladder")) == hash(ThingTitle(name="step-ladder"))
