"""Factories for money totals and waiting lists."""

from .money_factory import MoneyFactory
from .waiting_list_factory import WaitingListFactory

__all__ = ["MoneyFactory", "WaitingListFactory"]
