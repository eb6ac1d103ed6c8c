from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...core.items import ErrorItem, RackItem
from ...core.machine import RackListMachine
from ...core.presentation import rack_detail
from ...core.state import LoadedWithLocation, state_name
from ...services.refresh_service import RackListController
from ..deps import get_controller
from ..schemas.racks import (
    ErrorEntry,
    RackDetailResponse,
    RackListResponse,
    RackSummary,
)


router = APIRouter()


@router.get("/racks", response_model=RackListResponse)
async def list_racks(
    controller: RackListController = Depends(get_controller),
) -> RackListResponse:
    await controller.ensure_loaded()
    return _list_response(controller.machine)


@router.post("/racks/refresh", response_model=RackListResponse)
async def refresh_racks(
    controller: RackListController = Depends(get_controller),
) -> RackListResponse:
    await controller.refresh()
    return _list_response(controller.machine)


@router.get("/racks/{rack_id}", response_model=RackDetailResponse)
async def get_rack(
    rack_id: str,
    controller: RackListController = Depends(get_controller),
) -> RackDetailResponse:
    rack = controller.find_rack(rack_id)
    if rack is None:
        raise HTTPException(status_code=404, detail=f"Unknown rack: {rack_id}")
    detail = rack_detail(rack, controller.machine.coordinate)
    return RackDetailResponse(
        id=detail.id,
        name=detail.name,
        latitude=detail.latitude,
        longitude=detail.longitude,
        classic_bikes=detail.classic_bikes,
        electric_bikes=detail.electric_bikes,
        capacity=detail.capacity,
        availability=detail.availability.value,
        distance_meters=detail.distance_meters,
        distance_label=detail.distance_label,
    )


def _list_response(machine: RackListMachine) -> RackListResponse:
    state = machine.state
    coordinate = state.coordinate if isinstance(state, LoadedWithLocation) else None
    entries: list[RackSummary | ErrorEntry] = []
    for item in machine.items():
        if isinstance(item, ErrorItem):
            entries.append(ErrorEntry(message=item.message))
        elif isinstance(item, RackItem):
            detail = rack_detail(item.rack, coordinate)
            entries.append(
                RackSummary(
                    id=item.rack.id,
                    name=item.rack.name,
                    classic_bikes=item.rack.classic_bikes,
                    electric_bikes=item.rack.electric_bikes,
                    empty_slots=item.rack.empty_slots,
                    availability=detail.availability.value,
                    distance_meters=detail.distance_meters,
                    distance_label=detail.distance_label,
                )
            )
    failure = machine.location_failure
    return RackListResponse(
        state=state_name(state),
        location_failure=failure.value if failure is not None else None,
        items=entries,
    )
