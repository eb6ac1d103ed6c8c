from __future__ import annotations

import logging
from collections.abc import Callable

from rackfeed.feed.errors import FetchError
from rackfeed.models import Coordinate, RackDirectory

from .items import ListItem, derive_items
from .location import LocationFailure
from .state import (
    Failed,
    ListState,
    LoadedNoLocation,
    LoadedWithLocation,
    Loading,
    Uninitialized,
    state_name,
)

logger = logging.getLogger(__name__)

Listener = Callable[[list[ListItem]], None]


class RackListMachine:
    """Holds the presentation state of the rack list.

    Fetches are tagged with a sequence number by ``begin_fetch``; a completion
    is applied only if its tag is the most recently issued one, so an older
    request finishing late never overwrites a newer result. The latest known
    coordinate is retained independently of the state and folded in whenever
    rack data exists.
    """

    def __init__(self) -> None:
        self.state: ListState = Uninitialized()
        self.coordinate: Coordinate | None = None
        self.location_failure: LocationFailure | None = None
        self.directory: RackDirectory | None = None
        self._issued = 0
        self._listeners: list[Listener] = []

    @property
    def latest_sequence(self) -> int:
        return self._issued

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def items(self) -> list[ListItem]:
        return derive_items(self.state)

    def begin_fetch(self) -> int:
        self._issued += 1
        self._transition(Loading())
        return self._issued

    def complete_fetch(self, sequence: int, directory: RackDirectory) -> bool:
        if not self._is_current(sequence):
            return False
        self.directory = directory
        racks = tuple(directory.racks.values())
        if self.coordinate is not None:
            self._transition(LoadedWithLocation(racks, self.coordinate))
        else:
            self._transition(LoadedNoLocation(racks))
        return True

    def fail_fetch(self, sequence: int, error: FetchError) -> bool:
        if not self._is_current(sequence):
            return False
        self._transition(Failed(error))
        return True

    def apply_coordinate(self, coordinate: Coordinate | None) -> None:
        if coordinate is None:
            return
        self.coordinate = coordinate
        self.location_failure = None
        state = self.state
        if isinstance(state, LoadedWithLocation) and state.coordinate == coordinate:
            return
        if isinstance(state, (LoadedNoLocation, LoadedWithLocation)):
            self._transition(LoadedWithLocation(state.racks, coordinate))

    def location_failed(self, failure: LocationFailure) -> None:
        self.location_failure = failure
        self.coordinate = None
        state = self.state
        if isinstance(state, LoadedWithLocation):
            self._transition(LoadedNoLocation(state.racks))

    def _is_current(self, sequence: int) -> bool:
        if sequence != self._issued:
            logger.debug(
                "Ignoring completion of superseded fetch %d (latest %d)",
                sequence,
                self._issued,
            )
            return False
        return True

    def _transition(self, state: ListState) -> None:
        if state == self.state:
            return
        logger.debug("%s -> %s", state_name(self.state), state_name(state))
        self.state = state
        items = self.items()
        for listener in list(self._listeners):
            listener(items)
