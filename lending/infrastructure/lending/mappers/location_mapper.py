"""Mapper for location records ↔ Domain conversion."""

from typing import Any

from lending.domain.common.value_objects import Distance, PhysicalArea, PhysicalLocation
from lending.infrastructure.lending.schemas.records import AreaRecord, LocationRecord


class LocationMapper:
    """Mapper for location and area records ↔ Domain conversion."""

    def to_domain(self, record: LocationRecord | dict[str, Any] | None) -> PhysicalLocation | None:
        """Convert a location record; a record with every field empty maps to None."""
        if record is None:
            return None
        if isinstance(record, dict):
            record = LocationRecord.model_validate(record)
        if record.is_empty:
            return None
        return PhysicalLocation(
            street_address=record.street_address or "",
            city=record.city or "",
            state=record.state or "",
            zip_code=record.zip_code or "",
            country=record.country or "",
            latitude=record.latitude,
            longitude=record.longitude,
        )

    def to_record(self, location: PhysicalLocation) -> LocationRecord:
        return LocationRecord(
            latitude=location.latitude,
            longitude=location.longitude,
            street_address=location.street_address,
            city=location.city,
            state=location.state,
            zip_code=location.zip_code,
            country=location.country,
        )

    def area_to_domain(self, record: AreaRecord | dict[str, Any] | None) -> PhysicalArea | None:
        """
        Convert an area record.

        Returns None when the centre point carries no data or the radius is
        missing or negative.
        """
        if record is None:
            return None
        if isinstance(record, dict):
            record = AreaRecord.model_validate(record)
        center = self.to_domain(record.center_point)
        if center is None:
            return None
        if record.radius_kilometers is None or record.radius_kilometers < 0:
            return None
        return PhysicalArea(center_point=center, radius=Distance(record.radius_kilometers))

    def area_to_record(self, area: PhysicalArea | None) -> AreaRecord | None:
        if area is None:
            return None
        return AreaRecord(
            center_point=self.to_record(area.center_point),
            radius_kilometers=area.radius.kilometers,
        )
