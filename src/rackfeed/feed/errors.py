"""Failure kinds of a rack directory fetch and their user-facing messages."""

from __future__ import annotations

COULD_NOT_RETRIEVE = "Could not retrieve data"
RECEIVED_INVALID = "Received invalid data"
INTERNAL_CONFIGURATION = "Internal configuration error"


class FetchError(Exception):
    """Base class for everything ``fetch()`` can fail with."""


class InvalidEndpointError(FetchError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid citybike endpoint: {url!r}")
        self.url = url


class TransportError(FetchError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class DecodeError(FetchError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Payload did not decode: {cause}")
        self.cause = cause


def user_message(error: FetchError) -> str:
    if isinstance(error, TransportError):
        return COULD_NOT_RETRIEVE
    if isinstance(error, DecodeError):
        return RECEIVED_INVALID
    # Errors not caused by external conditions
    return INTERNAL_CONFIGURATION
