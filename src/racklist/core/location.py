"""Device location as a stream of coordinates with a terminal failure.

Consumers subscribe and receive zero or more ``Coordinate | None`` values,
optionally followed by exactly one ``LocationFailure``. The platform side
(permission prompts, GPS callbacks) drives the source through the
``start``/``authorization_changed``/``location_updated`` hooks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rackfeed.models import Coordinate

logger = logging.getLogger(__name__)

CoordinateHandler = Callable[[Coordinate | None], None]
FailureHandler = Callable[["LocationFailure"], None]


class LocationFailure(str, Enum):
    NOT_AUTHORIZED = "not_authorized"
    LOCATION_DISABLED = "location_disabled"


class Authorization(str, Enum):
    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"


class SourceState(str, Enum):
    UNINITIALIZED = "uninitialized"
    REQUESTING_AUTHORIZATION = "requesting_authorization"
    AWAITING_LOCATION = "awaiting_location"
    DENIED = "denied"
    HAS_LOCATION = "has_location"
    STOPPED = "stopped"


@dataclass(eq=False)
class Subscription:
    on_coordinate: CoordinateHandler
    on_failure: FailureHandler | None
    source: LocationSource | None = None

    def cancel(self) -> None:
        if self.source is not None:
            self.source._remove(self)
            self.source = None


class LocationSource:
    def __init__(self) -> None:
        self.state = SourceState.UNINITIALIZED
        self.current: Coordinate | None = None
        self.failure: LocationFailure | None = None
        self._subscriptions: list[Subscription] = []

    def subscribe(
        self,
        on_coordinate: CoordinateHandler,
        on_failure: FailureHandler | None = None,
    ) -> Subscription:
        subscription = Subscription(on_coordinate, on_failure)
        if self.failure is not None:
            if on_failure is not None:
                on_failure(self.failure)
            return subscription
        subscription.source = self
        self._subscriptions.append(subscription)
        on_coordinate(self.current)
        return subscription

    def start(self, services_enabled: bool, authorization: Authorization) -> None:
        if not services_enabled:
            self.services_disabled()
            return
        if authorization is Authorization.AUTHORIZED:
            self.state = SourceState.AWAITING_LOCATION
        elif authorization is Authorization.NOT_DETERMINED:
            self.state = SourceState.REQUESTING_AUTHORIZATION
        else:
            self.authorization_changed(authorization)

    def authorization_changed(self, authorization: Authorization) -> None:
        if authorization is Authorization.AUTHORIZED:
            self.state = SourceState.AWAITING_LOCATION
        elif authorization is Authorization.DENIED:
            self.state = SourceState.DENIED
            self._finish(LocationFailure.NOT_AUTHORIZED)

    def location_updated(self, coordinate: Coordinate) -> None:
        if self.failure is not None or self.state is SourceState.STOPPED:
            return
        self.state = SourceState.HAS_LOCATION
        self.current = coordinate
        for subscription in list(self._subscriptions):
            subscription.on_coordinate(coordinate)

    def location_error(self, denied: bool) -> None:
        # Transient errors leave the stream open; only a denial terminates it
        if denied:
            self.state = SourceState.DENIED
            self._finish(LocationFailure.NOT_AUTHORIZED)

    def services_disabled(self) -> None:
        self._finish(LocationFailure.LOCATION_DISABLED)

    def stop(self) -> None:
        self.state = SourceState.STOPPED

    def _finish(self, failure: LocationFailure) -> None:
        if self.failure is not None:
            return
        logger.info("Location unavailable: %s", failure.value)
        self.failure = failure
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.source = None
            if subscription.on_failure is not None:
                subscription.on_failure(failure)

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
