from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from rackfeed.feed.errors import FetchError
from rackfeed.feed.validators import feed_timestamp, is_feed_advanced
from rackfeed.models import Rack, RackDirectory

from ..core.location import LocationSource, Subscription
from ..core.machine import RackListMachine
from ..core.state import LoadedNoLocation, LoadedWithLocation, Uninitialized

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self) -> RackDirectory: ...


class RackListController:
    """Drives a ``RackListMachine`` from fetch completions and location events.

    All state changes happen on the event loop that awaits ``refresh``; the
    fetch itself is the only suspension point.
    """

    def __init__(
        self, fetcher: Fetcher, machine: RackListMachine | None = None
    ) -> None:
        self.fetcher = fetcher
        self.machine = machine if machine is not None else RackListMachine()
        self._feed_ts: datetime | None = None

    async def refresh(self) -> bool:
        sequence = self.machine.begin_fetch()
        try:
            directory = await self.fetcher.fetch()
        except FetchError as exc:
            logger.warning("Rack fetch %d failed: %s", sequence, exc)
            return self.machine.fail_fetch(sequence, exc)

        applied = self.machine.complete_fetch(sequence, directory)
        if applied:
            self._note_feed_timestamp(directory)
        return applied

    async def ensure_loaded(self) -> None:
        if isinstance(self.machine.state, Uninitialized):
            await self.refresh()

    def attach_location(self, source: LocationSource) -> Subscription:
        return source.subscribe(
            self.machine.apply_coordinate, self.machine.location_failed
        )

    def find_rack(self, rack_id: str) -> Rack | None:
        """Look a rack up by its directory key, then by its own ``id``."""
        state = self.machine.state
        directory = self.machine.directory
        if directory is None or not isinstance(
            state, (LoadedNoLocation, LoadedWithLocation)
        ):
            return None
        if rack_id in directory.racks:
            return directory.racks[rack_id]
        for rack in state.racks:
            if rack.id == rack_id:
                return rack
        return None

    def _note_feed_timestamp(self, directory: RackDirectory) -> None:
        current = feed_timestamp(directory)
        if not is_feed_advanced(self._feed_ts, current):
            logger.info("Citybike feed has not advanced since %s", self._feed_ts)
        if current is not None:
            self._feed_ts = current
