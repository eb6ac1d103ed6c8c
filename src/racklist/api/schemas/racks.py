from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class RackSummary(BaseModel):
    kind: Literal["rack"] = "rack"
    id: str
    name: str
    classic_bikes: int
    electric_bikes: int
    empty_slots: int
    availability: str
    distance_meters: float | None = None
    distance_label: str | None = None


class ErrorEntry(BaseModel):
    kind: Literal["error"] = "error"
    message: str
    retry: bool = True


class RackListResponse(BaseModel):
    state: str
    location_failure: str | None = None
    items: list[RackSummary | ErrorEntry]


class RackDetailResponse(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    classic_bikes: int
    electric_bikes: int
    capacity: int
    availability: str
    distance_meters: float | None = None
    distance_label: str | None = None
