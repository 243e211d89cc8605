"""
Location value objects.

A Location is one of:
- PhysicalLocation: a postal address with optional coordinates
- PhysicalArea: a centre point plus a radius
- VirtualLocation: a URL

Distances between physical locations use the haversine great-circle
formula over a spherical Earth.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, Self

from ..exceptions import DomainError, ValidationError
from ..value_object import ValueObject

EARTH_RADIUS_KM: Final = 6371.0
KILOMETERS_PER_MILE: Final = 1.60934


def _differ(left: float | None, right: float | None) -> bool:
    return left is not None and right is not None and left != right


@dataclass(frozen=True, order=True)
class Distance(ValueObject):
    """A non-negative distance, stored in kilometers."""

    kilometers: float

    def __post_init__(self) -> None:
        if self.kilometers < 0:
            raise ValidationError(
                "kilometers must be >= 0", field="kilometers", value=self.kilometers
            )

    @classmethod
    def from_miles(cls, miles: float) -> Self:
        return cls(miles * KILOMETERS_PER_MILE)

    @property
    def miles(self) -> float:
        return self.kilometers / KILOMETERS_PER_MILE

    def __add__(self, other: "Distance") -> "Distance":
        return Distance(self.kilometers + other.kilometers)


@dataclass(frozen=True)
class URL(ValueObject):
    """A URL kept as given; no parsing or normalisation."""

    value: str

    @classmethod
    def try_parse(cls, url: str | None) -> Self | None:
        if not url:
            return None
        return cls(url)

    def __str__(self) -> str:
        return self.value


class Location(ABC):
    """Anything an item can be stored at or returned to."""

    @abstractmethod
    def contains(self, other: "Location") -> bool:
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class PhysicalLocation(ValueObject, Location):
    street_address: str
    city: str
    state: str
    zip_code: str
    country: str
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def __eq__(self, other: object) -> bool:
        # Coordinates only break equality when both sides carry them
        if not isinstance(other, PhysicalLocation):
            return False
        if _differ(self.latitude, other.latitude) or _differ(self.longitude, other.longitude):
            return False
        return (
            self.street_address == other.street_address
            and self.city == other.city
            and self.state == other.state
            and self.zip_code == other.zip_code
        )

    def __hash__(self) -> int:
        return hash((self.street_address, self.city, self.state, self.zip_code))

    def contains(self, other: Location) -> bool:
        return isinstance(other, PhysicalLocation) and self == other

    def distance(self, other: "PhysicalLocation") -> Distance:
        """Great-circle distance to another location with coordinates."""
        if self.latitude is None or self.longitude is None:
            raise DomainError("This location does not have latitude and longitude set")
        if other.latitude is None or other.longitude is None:
            raise DomainError("The other location does not have latitude and longitude set")

        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)

        dlon = lon2 - lon1
        dlat = lat2 - lat1
        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return Distance(EARTH_RADIUS_KM * c)

    @classmethod
    def empty(cls) -> Self:
        """Placeholder used when a record carries no address at all."""
        return cls(street_address="", city="", state="", zip_code="", country="")


@dataclass(frozen=True)
class PhysicalArea(ValueObject, Location):
    center_point: PhysicalLocation
    radius: Distance

    def contains(self, other: Location) -> bool:
        if isinstance(other, PhysicalLocation):
            return self.center_point.distance(other) < self.radius
        if isinstance(other, PhysicalArea):
            offset = self.center_point.distance(other.center_point)
            return offset + other.radius < self.radius
        raise DomainError(f"Cannot compute contain for location type {type(other).__name__}")


@dataclass(frozen=True)
class VirtualLocation(ValueObject, Location):
    url: URL

    def contains(self, other: Location) -> bool:
        return isinstance(other, VirtualLocation) and self.url == other.url


@dataclass(frozen=True)
class MOPServer(VirtualLocation):
    """The mutual-ownership-protocol server a library publishes on."""

    version: str = "0.0.0"

    @classmethod
    def localhost(cls) -> Self:
        return cls(url=URL("https://localhost"), version="0.0.0")
