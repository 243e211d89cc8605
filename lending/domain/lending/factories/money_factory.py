from collections.abc import Iterable
from dataclasses import dataclass

from lending.domain.common.value_objects import Currency, Money


@dataclass
class MoneyFactory:
    """Builds empty amounts and totals in a library's working currency."""

    default_currency: Currency = Currency.EUR

    def empty(self, currency: Currency | None = None) -> Money:
        return Money(0, currency or self.default_currency)

    def total(self, amounts: Iterable[Money], currency: Currency | None = None) -> Money:
        """
        Sum amounts of one currency.

        The running total starts in ``currency`` when given, else in the
        first amount's currency, else in the default currency. Any amount
        in another currency raises CurrencyMismatchError.
        """
        amounts = list(amounts)
        if currency is None:
            currency = amounts[0].currency if amounts else self.default_currency
        result = self.empty(currency)
        for amount in amounts:
            result = result + amount
        return result
