from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rackfeed.feed.errors import user_message
from rackfeed.models import Coordinate, Rack

from .distance import distance_meters
from .state import Failed, ListState, LoadedNoLocation, LoadedWithLocation


@dataclass(frozen=True)
class RackItem:
    rack: Rack


@dataclass(frozen=True)
class ErrorItem:
    message: str


ListItem = RackItem | ErrorItem


def sort_by_name(racks: Sequence[Rack]) -> list[Rack]:
    return sorted(racks, key=lambda rack: rack.name)


def sort_by_distance(racks: Sequence[Rack], coordinate: Coordinate) -> list[Rack]:
    return sorted(
        racks,
        key=lambda rack: (distance_meters(coordinate, rack.coordinate), rack.name),
    )


def derive_items(state: ListState) -> list[ListItem]:
    if isinstance(state, LoadedNoLocation):
        return [RackItem(rack) for rack in sort_by_name(state.racks)]
    if isinstance(state, LoadedWithLocation):
        return [
            RackItem(rack) for rack in sort_by_distance(state.racks, state.coordinate)
        ]
    if isinstance(state, Failed):
        return [ErrorItem(user_message(state.error))]
    return []
