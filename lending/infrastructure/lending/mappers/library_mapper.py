"""Mapper for distributed library documents ↔ Domain conversion."""

from datetime import timedelta
from typing import Any

from lending.config import Settings
from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ID, URL, Money, MOPServer
from lending.domain.lending.factories import MoneyFactory, WaitingListFactory
from lending.domain.lending.fee_schedules import ZeroFeeSchedule
from lending.domain.lending.libraries import DistributedLibrary
from lending.infrastructure.lending.schemas.records import DistributedLibraryRecord

from .location_mapper import LocationMapper


class DistributedLibraryMapper:
    """Mapper for distributed library documents ↔ Domain conversion."""

    def __init__(self, settings: Settings, location_mapper: LocationMapper | None = None) -> None:
        self.settings = settings
        self.location_mapper = location_mapper or LocationMapper()

    def to_domain(self, record: DistributedLibraryRecord | dict[str, Any]) -> DistributedLibrary:
        """
        Convert a stored library document.

        Mapped libraries charge no fees and use the configured waiting list
        type, currency and suspension threshold.

        Raises:
            ValidationError: If the document has no name
            MalformedIdError: If library_id is not a UUID
        """
        if isinstance(record, dict):
            record = DistributedLibraryRecord.model_validate(record)
        if not record.name:
            raise ValidationError("Name is required", field="name")

        loan_days = record.default_loan_time_days
        if loan_days is None:
            loan_days = self.settings.DEFAULT_LOAN_DAYS
        public_url = record.public_url.strip() if record.public_url else ""
        currency = self.settings.DEFAULT_CURRENCY

        return DistributedLibrary(
            id=ID.parse(record.library_id),
            name=record.name,
            waiting_list_type=self.settings.DEFAULT_WAITING_LIST_TYPE,
            max_fines_before_suspension=Money(self.settings.MAX_FINES_BEFORE_SUSPENSION, currency),
            fee_schedule=ZeroFeeSchedule(currency),
            default_loan_time=timedelta(days=max(1, loan_days)),
            public_url=URL(public_url) if public_url else None,
            mop_server=MOPServer.localhost(),
            money_factory=MoneyFactory(default_currency=currency),
            waiting_list_factory=WaitingListFactory(
                reservation_days=self.settings.RESERVATION_DAYS
            ),
            area=self.location_mapper.area_to_domain(record.area),
        )

    def serialize_area(self, library: DistributedLibrary) -> dict[str, Any] | None:
        record = self.location_mapper.area_to_record(library.area)
        return record.model_dump() if record else None
