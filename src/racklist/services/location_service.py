from __future__ import annotations

from rackfeed.models import Coordinate

from ..core.location import (
    Authorization,
    LocationFailure,
    LocationSource,
    Subscription,
)
from .refresh_service import RackListController


class LocationSession:
    """Feeds client-reported coordinates into a controller.

    A failed source is terminal, so a coordinate pushed after a failure
    starts a new source and subscribes the controller to it again.
    """

    def __init__(self, controller: RackListController) -> None:
        self.controller = controller
        self.source = LocationSource()
        self._subscription: Subscription | None = None
        self._attach(self.source)

    def push(self, coordinate: Coordinate) -> None:
        if self.source.failure is not None:
            self._attach(LocationSource())
        self.source.location_updated(coordinate)

    def fail(self, failure: LocationFailure) -> None:
        if failure is LocationFailure.LOCATION_DISABLED:
            self.source.services_disabled()
        else:
            self.source.authorization_changed(Authorization.DENIED)

    def _attach(self, source: LocationSource) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
        self.source = source
        source.start(services_enabled=True, authorization=Authorization.AUTHORIZED)
        self._subscription = self.controller.attach_location(source)
