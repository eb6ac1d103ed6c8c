from __future__ import annotations

from pydantic import BaseModel, Field


class CoordinateIn(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class LocationStatus(BaseModel):
    state: str
    latitude: float | None = None
    longitude: float | None = None
    failure: str | None = None
