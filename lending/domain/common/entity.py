"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Thing(Entity):
        id: ID
        title: ThingTitle

        def mark_damaged(self) -> None:
            self.status = ThingStatus.DAMAGED

Subclasses are declared with ``@dataclass(eq=False)`` so the generated
field-by-field ``__eq__`` does not replace identity equality.
"""

from abc import ABC

from .value_objects.ids import ID


class Entity(ABC):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, archived by the caller)

    Subclasses must have an 'id' attribute of type ID.
    """

    id: ID

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
