"""Tests for ThingMapper."""

from uuid import uuid4

import pytest

from lending.domain.common.exceptions import MalformedIdError, ValidationError
from lending.domain.common.value_objects import ID, PhysicalLocation
from lending.domain.lending.statuses import ThingStatus
from lending.infrastructure.lending.mappers import ThingMapper


@pytest.fixture
def mapper() -> ThingMapper:
    return ThingMapper()


@pytest.fixture
def document() -> dict:
    return {
        "id": str(uuid4()),
        "name": "Pressure Washer",
        "description": "Electric, 2000 PSI",
        "status": "WAITING_FOR_LENDER_APPROVAL_TO_BORROW",
        "offeredBy": {"id": str(uuid4()), "email": "owner@example.org"},
        "requestedToBorrowBy": str(uuid4()),
        "tags": ["garden"],
    }


class TestToDomain:
    def test_maps_document(self, mapper, document) -> None:
        thing = mapper.to_domain(document)

        assert thing.id == ID(document["id"])
        assert thing.title.name == "Pressure Washer"
        assert thing.description == "Electric, 2000 PSI"
        assert thing.owner_id == ID(document["offeredBy"]["id"])
        assert thing.requested_to_borrow_by == ID(document["requestedToBorrowBy"])
        assert thing.status is ThingStatus.WAITING_FOR_LENDER_APPROVAL_TO_BORROW
        assert thing.storage_location == PhysicalLocation.empty()

    def test_owner_as_plain_id(self, mapper, document) -> None:
        owner = str(uuid4())
        document["offeredBy"] = owner
        assert mapper.to_domain(document).owner_id == ID(owner)

    def test_defaults(self, mapper) -> None:
        thing = mapper.to_domain({"_id": str(uuid4()), "offeredBy": str(uuid4())})
        assert thing.title.name == "Untitled"
        assert thing.status is ThingStatus.READY
        assert thing.requested_to_borrow_by is None
        assert thing.description is None

    def test_status_is_restored_without_transition_checks(self, mapper, document) -> None:
        document["status"] = "DAMAGED"
        assert mapper.to_domain(document).status is ThingStatus.DAMAGED

    def test_malformed_owner(self, mapper, document) -> None:
        document["offeredBy"] = "unknown"
        with pytest.raises(MalformedIdError):
            mapper.to_domain(document)

    def test_unknown_status(self, mapper, document) -> None:
        document["status"] = "LOST"
        with pytest.raises(ValidationError):
            mapper.to_domain(document)


class TestToRecord:
    def test_preserves_unrelated_fields(self, mapper, document) -> None:
        thing = mapper.to_domain(document)
        thing.reject_borrow_request()

        record = mapper.to_record(thing, document)

        assert record["tags"] == ["garden"]
        assert record["name"] == "Pressure Washer"
        assert record["status"] == "READY"
        assert record["requestedToBorrowBy"] is None
        assert record["offeredBy"] == document["offeredBy"]["id"]

    def test_writes_requester(self, mapper, document) -> None:
        thing = mapper.to_domain({**document, "status": "READY", "requestedToBorrowBy": None})
        requester = ID.generate()
        thing.request_borrow(requester)

        record = mapper.to_record(thing, document)

        assert record["requestedToBorrowBy"] == str(requester)
        assert record["status"] == "WAITING_FOR_LENDER_APPROVAL_TO_BORROW"
