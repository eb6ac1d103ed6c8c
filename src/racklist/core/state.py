from __future__ import annotations

from dataclasses import dataclass

from rackfeed.feed.errors import FetchError
from rackfeed.models import Coordinate, Rack


@dataclass(frozen=True)
class Uninitialized:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class LoadedNoLocation:
    racks: tuple[Rack, ...]


@dataclass(frozen=True)
class LoadedWithLocation:
    racks: tuple[Rack, ...]
    coordinate: Coordinate


@dataclass(frozen=True)
class Failed:
    error: FetchError


ListState = Uninitialized | Loading | LoadedNoLocation | LoadedWithLocation | Failed


def state_name(state: ListState) -> str:
    names = {
        Uninitialized: "uninitialized",
        Loading: "loading",
        LoadedNoLocation: "loaded",
        LoadedWithLocation: "loaded_with_location",
        Failed: "failed",
    }
    return names[type(state)]
