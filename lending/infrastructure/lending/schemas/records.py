"""Schemas for persisted lending documents."""

import math
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOCATION_FIELDS = (
    "street_address",
    "city",
    "state",
    "zip_code",
    "country",
    "latitude",
    "longitude",
)


def _reference_id(value: Any) -> Any:
    """Relations are stored either as a bare id or as the related document."""
    if isinstance(value, dict):
        return value.get("id") or value.get("value")
    return value


class LocationRecord(BaseModel):
    """Postal address with optional coordinates."""

    latitude: float | None = Field(None, description="Latitude in degrees")
    longitude: float | None = Field(None, description="Longitude in degrees")
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in LOCATION_FIELDS)


class AreaRecord(BaseModel):
    """Centre point plus radius."""

    center_point: LocationRecord | None = None
    radius_kilometers: float | None = Field(None, description="Radius in kilometers")

    @field_validator("radius_kilometers", mode="before")
    @classmethod
    def parse_radius(cls, value: Any) -> float | None:
        """Unparseable radii are treated as missing."""
        if value is None or value == "":
            return None
        try:
            radius = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(radius):
            return None
        return radius


class ItemRecord(BaseModel):
    """
    A stored item document.

    Unknown fields are kept so a document can be written back without
    losing anything the domain does not model.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    offered_by: str | None = Field(None, alias="offeredBy")
    requested_to_borrow_by: str | None = Field(None, alias="requestedToBorrowBy")

    @field_validator("id", "offered_by", "requested_to_borrow_by", mode="before")
    @classmethod
    def resolve_reference(cls, value: Any) -> Any:
        value = _reference_id(value)
        return str(value) if value is not None else None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ItemRecord":
        """Validate a raw document, accepting ``_id`` in place of ``id``."""
        if not document.get("id") and document.get("_id"):
            document = {**document, "id": document["_id"]}
        return cls.model_validate(document)


class DistributedLibraryRecord(BaseModel):
    """A stored distributed library document."""

    model_config = ConfigDict(extra="ignore")

    library_id: str
    name: str | None = None
    public_url: str | None = None
    default_loan_time_days: int | None = Field(None, description="Default loan length in days")
    area: AreaRecord | None = None


class LoanRecord(BaseModel):
    """A stored loan document."""

    model_config = ConfigDict(extra="ignore")

    loan_id: str
    item: str
    borrower: str
    due_date: datetime | date | None = None
    status: str | None = None
    return_location: LocationRecord | None = None
    time_returned: datetime | None = None

    @field_validator("item", "borrower", mode="before")
    @classmethod
    def resolve_reference(cls, value: Any) -> Any:
        value = _reference_id(value)
        return str(value) if value is not None else value
