from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rackfeed.feed.client import RackDirectoryFetcher

from ..api.routes import location, racks
from ..services.location_service import LocationSession
from ..services.refresh_service import RackListController


def create_app(controller: RackListController | None = None) -> FastAPI:
    if controller is None:
        controller = RackListController(RackDirectoryFetcher())

    app = FastAPI(title="Turku Citybike Racks API")
    app.state.controller = controller
    app.state.location = LocationSession(controller)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(racks.router)
    app.include_router(location.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "racklist"}

    return app


app = create_app()
