from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import floor, log10

from rackfeed.models import Coordinate, Rack

from .distance import distance_meters


class Availability(str, Enum):
    NONE = "none"
    CLASSIC = "classic"
    ELECTRIC = "electric"
    BOTH = "both"


@dataclass(frozen=True)
class RackDetail:
    id: str
    name: str
    latitude: float
    longitude: float
    classic_bikes: int
    electric_bikes: int
    capacity: int
    availability: Availability
    distance_meters: float | None
    distance_label: str | None


def availability(rack: Rack) -> Availability:
    if rack.classic_bikes > 0 and rack.electric_bikes > 0:
        return Availability.BOTH
    if rack.classic_bikes > 0:
        return Availability.CLASSIC
    if rack.electric_bikes > 0:
        return Availability.ELECTRIC
    return Availability.NONE


def format_distance(meters: float) -> str:
    if meters > 1000:
        return f"{_two_significant(meters / 1000)} km"
    return f"{_two_significant(meters)} m"


def _two_significant(value: float) -> str:
    if value == 0:
        return "0.0"
    rounded = round(value, 2 - _integer_digits(value))
    # Rounding can carry into a new digit, e.g. 9.96 -> 10
    decimals = max(0, 2 - _integer_digits(rounded))
    return f"{rounded:.{decimals}f}"


def _integer_digits(value: float) -> int:
    return floor(log10(abs(value))) + 1


def rack_detail(rack: Rack, coordinate: Coordinate | None = None) -> RackDetail:
    meters = None
    label = None
    if coordinate is not None:
        meters = distance_meters(coordinate, rack.coordinate)
        label = format_distance(meters)
    return RackDetail(
        id=rack.id,
        name=rack.name,
        latitude=rack.latitude,
        longitude=rack.longitude,
        classic_bikes=rack.classic_bikes,
        electric_bikes=rack.electric_bikes,
        capacity=rack.capacity,
        availability=availability(rack),
        distance_meters=meters,
        distance_label=label,
    )
