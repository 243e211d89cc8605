"""Mapper for item documents ↔ Domain conversion."""

from typing import Any

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ID, PhysicalLocation, ThingTitle
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.statuses import ThingStatus
from lending.infrastructure.lending.schemas.records import ItemRecord


def parse_thing_status(value: str | None) -> ThingStatus:
    if not value:
        return ThingStatus.READY
    try:
        return ThingStatus(value)
    except ValueError as e:
        raise ValidationError("Unknown item status", field="status", value=value) from e


class ThingMapper:
    """Mapper for item documents ↔ Domain conversion."""

    def to_domain(self, record: ItemRecord | dict[str, Any]) -> Thing:
        """
        Convert a stored item document to a Thing.

        Status and pending requester are restored as stored, without
        running them through the transition table. Items are mapped with
        an empty placeholder storage location.

        Raises:
            MalformedIdError: If the item, owner or requester id is not a UUID
            ValidationError: If the stored status is unknown
        """
        if isinstance(record, dict):
            record = ItemRecord.from_document(record)

        title = ThingTitle(name=record.name or "Untitled", description=record.description or None)
        requested_by = (
            ID.parse(record.requested_to_borrow_by) if record.requested_to_borrow_by else None
        )
        return Thing.create_with_id(
            id=ID.parse(record.id),
            title=title,
            owner_id=ID.parse(record.offered_by),
            storage_location=PhysicalLocation.empty(),
            status=parse_thing_status(record.status),
            description=record.description or None,
            requested_to_borrow_by=requested_by,
        )

    def to_record(self, thing: Thing, original: dict[str, Any] | None = None) -> dict[str, Any]:
        """Write the domain-owned fields over the original document."""
        return {
            **(original or {}),
            "status": thing.status.value,
            "requestedToBorrowBy": (
                str(thing.requested_to_borrow_by) if thing.requested_to_borrow_by else None
            ),
            "offeredBy": str(thing.owner_id),
        }
