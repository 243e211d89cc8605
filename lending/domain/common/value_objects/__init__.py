"""Common value objects shared across all domain modules."""

from .due_date import DueDate, utc_day
from .ids import ID
from .location import (
    URL,
    Distance,
    Location,
    MOPServer,
    PhysicalArea,
    PhysicalLocation,
    VirtualLocation,
)
from .money import Currency, Money
from .person_name import EmailAddress, PersonName
from .thing_title import ThingTitle

__all__ = [
    "ID",
    "URL",
    "Currency",
    "Distance",
    "DueDate",
    "EmailAddress",
    "Location",
    "MOPServer",
    "Money",
    "PersonName",
    "PhysicalArea",
    "PhysicalLocation",
    "ThingTitle",
    "VirtualLocation",
    "utc_day",
]
