from __future__ import annotations

from fastapi import APIRouter, Depends

from rackfeed.models import Coordinate

from ...core.location import LocationFailure
from ...services.location_service import LocationSession
from ..deps import get_location_session
from ..schemas.location import CoordinateIn, LocationStatus


router = APIRouter()


@router.put("/location", response_model=LocationStatus)
async def put_location(
    body: CoordinateIn,
    session: LocationSession = Depends(get_location_session),
) -> LocationStatus:
    session.push(Coordinate(latitude=body.latitude, longitude=body.longitude))
    return _status(session)


@router.delete("/location", response_model=LocationStatus)
async def delete_location(
    reason: LocationFailure = LocationFailure.NOT_AUTHORIZED,
    session: LocationSession = Depends(get_location_session),
) -> LocationStatus:
    session.fail(reason)
    return _status(session)


def _status(session: LocationSession) -> LocationStatus:
    source = session.source
    current = source.current
    return LocationStatus(
        state=source.state.value,
        latitude=current.latitude if current is not None else None,
        longitude=current.longitude if current is not None else None,
        failure=source.failure.value if source.failure is not None else None,
    )
