from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Rack:
    id: str
    name: str
    latitude: float
    longitude: float
    classic_bikes: int
    electric_bikes: int
    empty_slots: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @property
    def bikes_available(self) -> int:
        return self.classic_bikes + self.electric_bikes

    @property
    def capacity(self) -> int:
        return self.classic_bikes + self.electric_bikes + self.empty_slots


@dataclass(frozen=True)
class RackDirectory:
    racks: Mapping[str, Rack]
    generated: int
    last_update: int
