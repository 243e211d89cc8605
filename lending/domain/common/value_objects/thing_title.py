"""
ThingTitle value object.

Titles power deduplication across items offered by different lenders:
two copies of the same drill or the same book share a title even when
only one of them was catalogued with a UPC or ISBN.
"""

from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True, eq=False)
class ThingTitle(ValueObject):
    name: str
    upc: str | None = None
    isbn: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Title name cannot be empty", field="name")

    def __eq__(self, other: object) -> bool:
        """
        Name must match; upc and isbn only have to match when both sides carry one.
        """
        if not isinstance(other, ThingTitle):
            return False
        if self.name != other.name:
            return False
        if self.upc and other.upc and self.upc != other.upc:
            return False
        if self.isbn and other.isbn and self.isbn != other.isbn:
            return False
        return True

    def __hash__(self) -> int:
        return hash(self.name.replace("_", "-").lower())
