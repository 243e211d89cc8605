"""Mapper for loan documents ↔ Domain conversion."""

from datetime import UTC, date, datetime, time
from typing import Any

from lending.domain.common.exceptions import ValidationError
from lending.domain.common.value_objects import ID, DueDate, PhysicalLocation, utc_day
from lending.domain.lending.entities.loan import Loan
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.statuses import LoanStatus
from lending.infrastructure.lending.schemas.records import LoanRecord

from .location_mapper import LocationMapper


def _as_utc(value: datetime | date | None) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class LoanMapper:
    """Mapper for loan documents ↔ Domain conversion."""

    def __init__(self, location_mapper: LocationMapper | None = None) -> None:
        self.location_mapper = location_mapper or LocationMapper()

    def to_domain(self, record: LoanRecord | dict[str, Any], thing: Thing) -> Loan:
        """Restore a loan of ``thing``; a missing status restores an active loan."""
        if isinstance(record, dict):
            record = LoanRecord.model_validate(record)
        if ID.parse(record.item) != thing.id:
            raise ValidationError(
                "Loan does not belong to this item", field="item", value=record.item
            )

        try:
            status = LoanStatus(record.status) if record.status else LoanStatus.BORROWED
        except ValueError as e:
            raise ValidationError("Unknown loan status", field="status", value=record.status) from e

        return Loan.create_with_id(
            id=ID.parse(record.loan_id),
            item=thing,
            due_date=DueDate(_as_utc(record.due_date)),
            borrower_id=ID.parse(record.borrower),
            status=status,
            return_location=self.location_mapper.to_domain(record.return_location),
            time_returned=_as_utc(record.time_returned),
        )

    def to_record(self, loan: Loan) -> dict[str, Any]:
        """Serialize with the effective status and the due day as ``YYYY-MM-DD``."""
        return_location = (
            self.location_mapper.to_record(loan.return_location).model_dump()
            if isinstance(loan.return_location, PhysicalLocation)
            else None
        )
        return {
            "loan_id": str(loan.id),
            "item": str(loan.item.id),
            "borrower": str(loan.borrower_id),
            "due_date": utc_day(loan.due_date.date).isoformat() if loan.due_date.date else None,
            "status": loan.status.value,
            "return_location": return_location,
            "time_returned": loan.time_returned.isoformat() if loan.time_returned else None,
        }
