from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..models import Rack, RackDirectory
from .errors import DecodeError


class RackPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    id: str
    name: str
    lat: float
    lon: float
    bikes_avail_classic: int = Field(ge=0)
    bikes_avail_electric: int = Field(ge=0)
    slots_avail: int = Field(ge=0)


class CitybikePayload(BaseModel):
    model_config = ConfigDict(strict=True)

    racks: dict[str, RackPayload]
    generated: int
    lastupdate: int


def decode_directory(payload: bytes | str) -> RackDirectory:
    try:
        parsed = CitybikePayload.model_validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(exc) from exc
    return to_directory(parsed)


def to_directory(parsed: CitybikePayload) -> RackDirectory:
    racks = {
        rack_id: Rack(
            id=rack.id,
            name=rack.name,
            latitude=rack.lat,
            longitude=rack.lon,
            classic_bikes=rack.bikes_avail_classic,
            electric_bikes=rack.bikes_avail_electric,
            empty_slots=rack.slots_avail,
        )
        for rack_id, rack in parsed.racks.items()
    }
    return RackDirectory(
        racks=racks,
        generated=parsed.generated,
        last_update=parsed.lastupdate,
    )
