from dataclasses import dataclass, field

from lending.domain.common.entity import Entity
from lending.domain.common.value_objects import ID, EmailAddress, PersonName
from lending.domain.lending.statuses import BorrowerVerificationFlags

from .library_fee import LibraryFee


@dataclass(eq=False)
class Person(Entity):
    id: ID
    name: PersonName
    emails: list[EmailAddress] = field(default_factory=list)

    @property
    def preferred_email(self) -> EmailAddress | None:
        if not self.emails:
            return None
        return self.emails[0]


@dataclass(eq=False)
class PersonBorrower(Person):
    """A person who is a member of a library and can carry fees."""

    library_id: ID | None = None
    verification_flags: list[BorrowerVerificationFlags] = field(default_factory=list)
    _fees: list[LibraryFee] = field(default_factory=list, repr=False)

    @property
    def fees(self) -> tuple[LibraryFee, ...]:
        return tuple(self._fees)

    @property
    def outstanding_fees(self) -> tuple[LibraryFee, ...]:
        return tuple(fee for fee in self._fees if fee.is_outstanding)

    def apply_fee(self, fee: LibraryFee) -> "PersonBorrower":
        self._fees.append(fee)
        return self

    def is_verified(self, flag: BorrowerVerificationFlags) -> bool:
        return flag in self.verification_flags

    @classmethod
    def create(
        cls,
        name: PersonName,
        library_id: ID,
        emails: list[EmailAddress] | None = None,
    ) -> "PersonBorrower":
        return cls(id=ID.generate(), name=name, emails=list(emails or []), library_id=library_id)
