from __future__ import annotations

from fastapi import Request

from ..services.location_service import LocationSession
from ..services.refresh_service import RackListController


def get_controller(request: Request) -> RackListController:
    return request.app.state.controller


def get_location_session(request: Request) -> LocationSession:
    return request.app.state.location
