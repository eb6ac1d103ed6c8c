from __future__ import annotations

import asyncio
from pathlib import Path
from urllib.error import URLError

import pytest

from rackfeed.feed.client import RackDirectoryFetcher, validate_endpoint
from rackfeed.feed.errors import DecodeError, InvalidEndpointError, TransportError


def test_fetch_decodes_response(payload_bytes: bytes) -> None:
    requested: list[tuple[str, float]] = []

    def opener(url: str, timeout: float) -> bytes:
        requested.append((url, timeout))
        return payload_bytes

    fetcher = RackDirectoryFetcher(
        url="https://data.foli.fi/citybike", timeout=5, opener=opener
    )
    directory = asyncio.run(fetcher.fetch())

    assert sorted(directory.racks) == ["A", "B"]
    assert requested == [("https://data.foli.fi/citybike", 5)]


def test_every_fetch_is_a_new_request(payload_bytes: bytes) -> None:
    calls: list[str] = []

    def opener(url: str, timeout: float) -> bytes:
        calls.append(url)
        return payload_bytes

    fetcher = RackDirectoryFetcher(url="https://example.org/citybike", opener=opener)
    asyncio.run(fetcher.fetch())
    asyncio.run(fetcher.fetch())

    assert len(calls) == 2


def test_network_failure_is_transport_error() -> None:
    def opener(url: str, timeout: float) -> bytes:
        raise URLError("no route to host")

    fetcher = RackDirectoryFetcher(url="https://example.org/citybike", opener=opener)

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(fetcher.fetch())
    assert isinstance(excinfo.value.cause, URLError)


def test_bad_body_is_decode_error() -> None:
    fetcher = RackDirectoryFetcher(
        url="https://example.org/citybike", opener=lambda url, timeout: b"{}"
    )

    with pytest.raises(DecodeError):
        asyncio.run(fetcher.fetch())


@pytest.mark.parametrize("url", ["", "data.foli.fi/citybike", "ftp://data.foli.fi/x"])
def test_invalid_endpoint(url: str) -> None:
    with pytest.raises(InvalidEndpointError):
        validate_endpoint(url)


def test_invalid_endpoint_never_opens(payload_bytes: bytes) -> None:
    def opener(url: str, timeout: float) -> bytes:
        raise AssertionError("should not be called")

    fetcher = RackDirectoryFetcher(url="citybike", opener=opener)

    with pytest.raises(InvalidEndpointError):
        asyncio.run(fetcher.fetch())


def test_url_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FOLI_CITYBIKE_URL", "https://example.org/racks")
    monkeypatch.setenv("FOLI_REQUEST_TIMEOUT", "2.5")

    fetcher = RackDirectoryFetcher()

    assert fetcher.url == "https://example.org/racks"
    assert fetcher.timeout == 2.5


def test_snapshot_file_replaces_network(
    tmp_path: Path, payload_bytes: bytes, monkeypatch: pytest.MonkeyPatch
) -> None:
    snapshot = tmp_path / "citybike.json"
    snapshot.write_bytes(payload_bytes)
    monkeypatch.setenv("FOLI_CITYBIKE_SNAPSHOT", str(snapshot))

    def opener(url: str, timeout: float) -> bytes:
        raise AssertionError("should not be called")

    fetcher = RackDirectoryFetcher(opener=opener)

    assert asyncio.run(fetcher.fetch()).racks["B"].name == "Beta"


def test_missing_snapshot_is_transport_error(tmp_path: Path) -> None:
    fetcher = RackDirectoryFetcher(snapshot=tmp_path / "missing.json")

    with pytest.raises(TransportError):
        asyncio.run(fetcher.fetch())


def test_record_dir_saves_network_body(
    tmp_path: Path, payload_bytes: bytes
) -> None:
    fetcher = RackDirectoryFetcher(
        url="https://example.org/citybike",
        opener=lambda url, timeout: payload_bytes,
        record_dir=tmp_path / "recorded",
    )

    asyncio.run(fetcher.fetch())

    recorded = list((tmp_path / "recorded").glob("citybike_*_raw.json"))
    assert len(recorded) == 1
    assert recorded[0].read_bytes() == payload_bytes


def test_record_dir_keeps_body_that_fails_to_decode(tmp_path: Path) -> None:
    fetcher = RackDirectoryFetcher(
        url="https://example.org/citybike",
        opener=lambda url, timeout: b'{"generated": 1}',
        record_dir=tmp_path,
    )

    with pytest.raises(DecodeError):
        asyncio.run(fetcher.fetch())

    [recorded] = tmp_path.glob("citybike_*_raw.json")
    assert recorded.read_bytes() == b'{"generated": 1}'
