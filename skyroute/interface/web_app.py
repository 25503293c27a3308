"""Mini README: FastAPI service exposing SkyRoute data to map front ends.

Structure:
    * create_application - application factory wiring the JSON routes.
    * _bounds_payload - serialises fitted bounds with renderer corners.

Routes:
    * GET /airports - marker data for every airport in the catalogue.
    * GET /route - arc and fitted bounds for an origin/destination pair.
    * GET /route/frames - per-step position and heading, produced by running
      the path animator on a manual clock so clients can replay it.

Unknown airport codes map to HTTP 404; the core itself never raises for them.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from ..airports import AirportCatalogue
from ..animation import ManualScheduler, PathAnimator
from ..configuration import get_settings
from ..geometry import Bounds, Coordinate, fit_bounds
from ..logging_utils import get_logger
from ..routing import Route, RouteViewer, build_route

LOGGER = get_logger(__name__)


def _bounds_payload(bounds: Bounds) -> Dict[str, object]:
    return {
        "min_lat": bounds.min_lat,
        "max_lat": bounds.max_lat,
        "min_lon": bounds.min_lon,
        "max_lon": bounds.max_lon,
        "corners": bounds.as_corners(),
        "padding": list(bounds.padding),
    }



def _unknown_route(origin_code: str, destination_code: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=f"Unknown airport code in route {origin_code} -> {destination_code}",
    )


def create_application(catalogue: Optional[AirportCatalogue] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="SkyRoute", version="0.1.0")
    settings = get_settings()
    airports = catalogue or AirportCatalogue.default()

    def _show(
        origin: Optional[str],
        destination: Optional[str],
        segments: Optional[int],
        frames: List[Dict[str, object]],
    ) -> tuple[RouteViewer, Route, ManualScheduler]:
        origin_code = origin or settings.default_origin
        destination_code = destination or settings.default_destination
        scheduler = ManualScheduler()

        def record(position: Coordinate, heading: float) -> None:
            frames.append(
                {"index": len(frames) + 1, "position": list(position.as_pair()), "heading": heading}
            )

        animator = PathAnimator(scheduler, on_tick=record, interval_ms=settings.tick_interval_ms)
        viewer = RouteViewer(airports, animator, segments=segments)
        route = viewer.show_route(origin_code, destination_code)
        if route is None:
            raise _unknown_route(origin_code, destination_code)
        return viewer, route, scheduler

    @app.get("/airports")
    async def list_airports() -> JSONResponse:
        """Return marker data for every airport."""

        payload = [airport.as_dict() for airport in airports]
        LOGGER.debug("Returning %s airports", len(payload))
        return JSONResponse({"airports": payload})

    @app.get("/route")
    async def route(
        origin: Optional[str] = Query(None),
        destination: Optional[str] = Query(None),
        segments: Optional[int] = Query(None, ge=1),
    ) -> JSONResponse:
        """Return the arc between two airports with its fitted bounds."""

        origin_code = origin or settings.default_origin
        destination_code = destination or settings.default_destination
        built = build_route(airports, origin_code, destination_code, segments=segments)
        if built is None:
            raise _unknown_route(origin_code, destination_code)
        payload = built.as_dict()
        payload["bounds"] = _bounds_payload(fit_bounds(built.path, settings.viewport_padding))
        return JSONResponse(payload)

    @app.get("/route/frames")
    async def route_frames(
        origin: Optional[str] = Query(None),
        destination: Optional[str] = Query(None),
        segments: Optional[int] = Query(None, ge=1),
    ) -> JSONResponse:
        """Run the animator to completion and return every emitted frame."""

        frames: List[Dict[str, object]] = []
        viewer, built, scheduler = _show(origin, destination, segments, frames)
        try:
            scheduler.run_until_idle()
            phase = viewer.animator.phase.value
        finally:
            viewer.close()
        LOGGER.info(
            "Generated %s frames for %s -> %s",
            len(frames),
            built.origin.code,
            built.destination.code,
        )
        return JSONResponse(
            {
                "origin": built.origin.code,
                "destination": built.destination.code,
                "interval_ms": viewer.animator.interval_ms,
                "start": list(built.path[0].as_pair()),
                "phase": phase,
                "frames": frames,
            }
        )

    return app
