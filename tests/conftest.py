from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from rackfeed.models import Rack, RackDirectory


def _rack_payload(
    rack_id: str,
    name: str,
    lat: float,
    lon: float,
    classic: int,
    electric: int,
    slots: int,
) -> dict[str, Any]:
    return {
        "id": rack_id,
        "name": name,
        "lat": lat,
        "lon": lon,
        "bikes_avail_classic": classic,
        "bikes_avail_electric": electric,
        "slots_avail": slots,
        "stop_code": "x",
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    return {
        "racks": {
            "A": _rack_payload("A", "Alpha", 60.45, 22.25, 3, 0, 2),
            "B": _rack_payload("B", "Beta", 60.46, 22.26, 0, 1, 5),
        },
        "generated": 1700000060,
        "lastupdate": 1700000000,
    }


@pytest.fixture
def payload_bytes(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def make_rack() -> Callable[..., Rack]:
    def factory(
        rack_id: str,
        name: str,
        latitude: float = 60.45,
        longitude: float = 22.25,
        classic: int = 1,
        electric: int = 0,
        slots: int = 1,
    ) -> Rack:
        return Rack(
            id=rack_id,
            name=name,
            latitude=latitude,
            longitude=longitude,
            classic_bikes=classic,
            electric_bikes=electric,
            empty_slots=slots,
        )

    return factory


@pytest.fixture
def make_directory() -> Callable[[list[Rack]], RackDirectory]:
    def factory(racks: list[Rack], last_update: int = 1700000000) -> RackDirectory:
        return RackDirectory(
            racks={rack.id: rack for rack in racks},
            generated=last_update + 60,
            last_update=last_update,
        )

    return factory
