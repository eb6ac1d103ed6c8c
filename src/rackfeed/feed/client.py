from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from http.client import HTTPException
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..models import RackDirectory
from .config import citybike_url, request_timeout_seconds, snapshot_path
from .errors import InvalidEndpointError, TransportError
from .parser import decode_directory
from .recorder import read_raw_payload, write_raw_payload

logger = logging.getLogger(__name__)

Opener = Callable[[str, float], bytes]


def validate_endpoint(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidEndpointError(url)
    return url


def _fetch_bytes(url: str, timeout: float) -> bytes:
    request = Request(url, headers={"Accept": "application/json"})
    with urlopen(request, timeout=timeout) as response:
        return response.read()


class RackDirectoryFetcher:
    """Fetches the citybike feed and decodes it into a ``RackDirectory``.

    Every call is a fresh round trip; nothing is retried or cached. When a
    snapshot file is configured the payload is read from disk instead. With
    ``record_dir`` set, each body read from the network is saved there before
    decoding, so a payload that fails to decode can be replayed as a snapshot.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        snapshot: Path | None = None,
        opener: Opener = _fetch_bytes,
        record_dir: Path | None = None,
    ) -> None:
        self.url = url if url is not None else citybike_url()
        self.timeout = timeout if timeout is not None else request_timeout_seconds()
        if snapshot is None:
            configured = snapshot_path()
            snapshot = Path(configured) if configured else None
        self.snapshot = snapshot
        self._opener = opener
        self.record_dir = record_dir

    async def fetch(self) -> RackDirectory:
        payload = await asyncio.to_thread(self._read_payload)
        return decode_directory(payload)

    def _read_payload(self) -> bytes:
        if self.snapshot is not None:
            try:
                return read_raw_payload(self.snapshot)
            except OSError as exc:
                raise TransportError(exc) from exc

        url = validate_endpoint(self.url)
        logger.debug("Requesting %s", url)
        try:
            payload = self._opener(url, self.timeout)
        except (OSError, HTTPException) as exc:
            raise TransportError(exc) from exc
        if self.record_dir is not None:
            self._record(payload)
        return payload

    def _record(self, payload: bytes) -> None:
        prefix = f"citybike_{int(time.time())}"
        try:
            path = write_raw_payload(self.record_dir, prefix, payload)
        except OSError:
            logger.warning(
                "Could not record payload in %s", self.record_dir, exc_info=True
            )
            return
        logger.info("Recorded payload to %s", path)
