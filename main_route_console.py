"""Mini README: Entry point CLI for the SkyRoute route viewer.

This script exposes a Typer CLI with three commands:
    * serve - start the FastAPI service with uvicorn.
    * airports - list the airports known to the demo catalogue.
    * fly - animate a route in the terminal, printing each step's position
      and heading. ``--instant`` drives the animator on a manual clock instead
      of waiting for real timer ticks.

Settings are drawn from ``SKYROUTE_*`` environment variables when options are
omitted.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import typer
import uvicorn

from skyroute.airports import AirportCatalogue
from skyroute.animation import AsyncioScheduler, ManualScheduler, PathAnimator, Scheduler
from skyroute.configuration import get_settings
from skyroute.geometry import Bounds, Coordinate
from skyroute.logging_utils import configure_root_logger
from skyroute.routing import RouteViewer

cli = typer.Typer(help="Plot and animate routes between demo airports.")


def _echo_bounds(bounds: Bounds) -> None:
    typer.echo(
        f"Viewport lat [{bounds.min_lat:.4f}, {bounds.max_lat:.4f}] "
        f"lon [{bounds.min_lon:.4f}, {bounds.max_lon:.4f}] padding {bounds.padding}"
    )


def _echo_tick(position: Coordinate, heading: float) -> None:
    typer.echo(f"{position.lat:10.4f} {position.lon:10.4f}  heading {heading:6.2f}")


def _build_viewer(
    scheduler: Scheduler,
    on_complete: Callable[[], None],
    segments: Optional[int],
    interval_ms: Optional[float],
    on_error: Optional[Callable[[BaseException], None]] = None,
) -> RouteViewer:
    animator = PathAnimator(
        scheduler,
        on_tick=_echo_tick,
        on_complete=on_complete,
        on_error=on_error,
        interval_ms=interval_ms,
    )
    return RouteViewer(
        AirportCatalogue.default(), animator, on_bounds=_echo_bounds, segments=segments
    )


def _start(viewer: RouteViewer, origin: str, destination: str) -> None:
    if viewer.show_route(origin, destination) is None:
        typer.echo(f"No route: unknown airport code in {origin} -> {destination}", err=True)
        raise typer.Exit(code=1)


async def _fly_live(
    origin: str, destination: str, segments: Optional[int], interval_ms: Optional[float]
) -> None:
    outcome: asyncio.Future = asyncio.get_running_loop().create_future()

    def finish() -> None:
        if not outcome.done():
            outcome.set_result(None)

    def fail(error: BaseException) -> None:
        if not outcome.done():
            outcome.set_exception(error)

    viewer = _build_viewer(AsyncioScheduler(), finish, segments, interval_ms, on_error=fail)
    try:
        _start(viewer, origin, destination)
        # Resolves on completion, raises the on_tick failure otherwise.
        await outcome
    finally:
        viewer.close()


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot open the 0.0.0.0 wildcard, point them at loopback.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SkyRoute on {effective_host}:{effective_port}.\n"
        f"Try http://{browser_host}:{effective_port}/route?origin=SYD&destination=SIN"
    )
    uvicorn.run(
        "skyroute.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def airports() -> None:
    """List the demo airports with their coordinates and fares."""

    for airport in AirportCatalogue.default():
        fare = f"from ${airport.price:,.0f}" if airport.price > 0 else "origin"
        typer.echo(
            f"{airport.code}  {airport.name:<12} "
            f"{airport.coordinate.lat:9.4f} {airport.coordinate.lon:10.4f}  {fare}"
        )


@cli.command()
def fly(
    origin: Optional[str] = typer.Argument(None, help="Origin airport code."),
    destination: Optional[str] = typer.Argument(None, help="Destination airport code."),
    segments: Optional[int] = typer.Option(None, min=1, help="Arc segment count."),
    interval_ms: Optional[float] = typer.Option(None, help="Milliseconds between steps."),
    instant: bool = typer.Option(False, help="Step through the route without waiting."),
) -> None:
    """Animate a route and print every step."""

    if interval_ms is not None and interval_ms <= 0:
        raise typer.BadParameter("must be a positive number", param_hint="--interval-ms")
    settings = get_settings()
    configure_root_logger()
    origin = origin or settings.default_origin
    destination = destination or settings.default_destination

    if instant:
        scheduler = ManualScheduler()
        viewer = _build_viewer(scheduler, lambda: None, segments, interval_ms)
        try:
            _start(viewer, origin, destination)
            scheduler.run_until_idle()
        finally:
            viewer.close()
    else:
        asyncio.run(_fly_live(origin, destination, segments, interval_ms))
    typer.echo(f"Arrived at {destination.upper()}.")


if __name__ == "__main__":
    cli()
