"""
Fee schedules.

A fee schedule is the policy a library uses to price overdue and
damaged returns. Libraries only depend on the FeeSchedule protocol.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from lending.domain.common.value_objects import Currency, Money

if TYPE_CHECKING:
    from .entities.loan import Loan


class FeeSchedule(Protocol):
    def fee_for_overdue_item(self, loan: "Loan") -> Money: ...

    def fee_for_damaged_item(self, loan: "Loan") -> Money | None: ...


@dataclass(frozen=True)
class PerDayFeeSchedule:
    """
    Charges a fixed amount for every whole day an item came back late.

    Days are counted between the due day and the day the item was
    returned (or today, for a return that has not been stamped yet).
    Permanent loans are never overdue and cost nothing.
    """

    daily_charge: Money
    damaged_item_fee: Money | None = None

    def fee_for_overdue_item(self, loan: "Loan") -> Money:
        if loan.due_date.date is None:
            return Money(0, self.daily_charge.currency)
        returned_at = loan.time_returned or datetime.now(UTC)
        return self.daily_charge * loan.due_date.days_overdue(returned_at)

    def fee_for_damaged_item(self, loan: "Loan") -> Money | None:
        return self.damaged_item_fee


@dataclass(frozen=True)
class FlatFeeSchedule:
    """Charges one fixed amount per overdue return and one per damaged return."""

    overdue_fee: Money
    damaged_fee: Money

    def fee_for_overdue_item(self, loan: "Loan") -> Money:
        return self.overdue_fee

    def fee_for_damaged_item(self, loan: "Loan") -> Money | None:
        return self.damaged_fee


@dataclass(frozen=True)
class ZeroFeeSchedule:
    """Never charges anything; used for libraries mapped without a fee policy."""

    currency: Currency = Currency.USD

    def fee_for_overdue_item(self, loan: "Loan") -> Money:
        return Money(0, self.currency)

    def fee_for_damaged_item(self, loan: "Loan") -> Money | None:
        return Money(0, self.currency)
