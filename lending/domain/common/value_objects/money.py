"""
Money value object.

An (amount, currency) pair with arbitrary-precision decimal amounts.
Addition and ordering only work inside one currency; mixing currencies
raises CurrencyMismatchError. Multiplying by a scalar is used for
per-day fee accrual.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ..exceptions import CurrencyMismatchError
from ..value_object import ValueObject


class Currency(str, Enum):
    """Closed set of currencies a library can charge in."""

    EUR = "Euro"
    USD = "US Dollar"
    HOUR = "Labor Token"


@dataclass(frozen=True, eq=False)
class Money(ValueObject):
    amount: Decimal
    currency: Currency
    symbol: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            # str() keeps floats like 7.5 exact instead of binary-expanded
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @property
    def dollars(self) -> Decimal:
        if self.currency is not Currency.USD:
            raise CurrencyMismatchError("Can only convert to dollars if currency is USD")
        return self.amount

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return False
        return self.currency == other.currency and self.amount == other.amount

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if self.currency != other.currency:
            raise CurrencyMismatchError("Can only add Money objects with the same currency")
        return Money(self.amount + other.amount, self.currency, self.symbol)

    def __mul__(self, multiplier: int | Decimal) -> "Money":
        if isinstance(multiplier, Money):
            return NotImplemented
        return Money(self.amount * Decimal(str(multiplier)), self.currency, self.symbol)

    __rmul__ = __mul__

    def __lt__(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount >= other.amount

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError()

    def to_json(self) -> dict[str, str]:
        data = {"amount": str(self.amount), "currency": self.currency.value}
        if self.symbol:
            data["symbol"] = self.symbol
        return data

    def to_primitive(self) -> dict[str, str]:
        return self.to_json()
