from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class PersonName(ValueObject):
    first_name: str
    last_name: str
    salutation: str | None = None
    middle_name: str | None = None
    suffix: str | None = None

    def __post_init__(self) -> None:
        if not self.first_name or not self.first_name.strip():
            raise ValidationError("First name cannot be empty", field="first_name")

    def __str__(self) -> str:
        parts = [self.salutation, self.first_name, self.middle_name, self.last_name, self.suffix]
        return " ".join(part for part in parts if part)


@dataclass(frozen=True)
class EmailAddress(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if "@" not in self.value:
            raise ValidationError("Invalid email format", field="email", value=self.value)

    def __str__(self) -> str:
        return self.value
