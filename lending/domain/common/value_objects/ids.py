from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

from ..exceptions import MalformedIdError
from ..value_object import ValueObject


@dataclass(frozen=True)
class ID(ValueObject):
    """
    Identifier shared by every entity in the lending model.

    Wraps a UUID string. Two IDs are equal iff their strings match.
    Construction validates the string, so a malformed id fails at the
    mapping boundary before any domain logic runs.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise MalformedIdError(self.value)
        try:
            UUID(self.value)
        except ValueError as err:
            raise MalformedIdError(self.value) from err

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(str(uuid4()))

    @classmethod
    def parse(cls, value: object) -> Self:
        """Build an ID from a raw record value (string or UUID)."""
        if isinstance(value, UUID):
            return cls(str(value))
        return cls(value)  # type: ignore[arg-type]

    def to_primitive(self) -> str:
        return self.value
