"""Mini README: Glue between the airport lookup, geometry and animator.

Structure:
    * Route - resolved origin/destination airports with their arc.
    * build_route - resolves two codes into a Route without any animator.
    * RouteViewer - builds routes from codes and drives a PathAnimator.

Control flow:
    codes -> AirportCatalogue.resolve -> generate_arc -> fit_bounds (once)
    -> PathAnimator.load_path -> on_bounds. Unknown codes are not errors: the
    viewer logs them, returns ``None`` and leaves any running animation alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from ..airports import Airport, AirportCatalogue
from ..animation import PathAnimator
from ..configuration import get_settings
from ..geometry import Bounds, Path, fit_bounds, generate_arc
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

BoundsListener = Callable[[Bounds], None]


@dataclass(frozen=True, slots=True)
class Route:
    """A resolved route between two airports."""

    origin: Airport
    destination: Airport
    path: Path

    def as_dict(self) -> Dict[str, object]:
        return {
            "origin": self.origin.as_dict(),
            "destination": self.destination.as_dict(),
            "path": [list(point.as_pair()) for point in self.path],
        }



def build_route(
    catalogue: AirportCatalogue,
    origin_code: str,
    destination_code: str,
    *,
    segments: Optional[int] = None,
    curvature: Optional[float] = None,
    damping: Optional[float] = None,
) -> Optional[Route]:
    """Resolve both codes and synthesise the arc, or return ``None``.

    Omitted arc parameters fall back to the configured settings.
    """

    origin = catalogue.resolve(origin_code)
    destination = catalogue.resolve(destination_code)
    if origin is None or destination is None:
        LOGGER.warning(
            "No route for %s -> %s: unknown airport code", origin_code, destination_code
        )
        return None
    settings = get_settings()
    path = generate_arc(
        origin.coordinate,
        destination.coordinate,
        settings.arc_segments if segments is None else segments,
        curvature=settings.arc_curvature if curvature is None else curvature,
        damping=settings.arc_damping if damping is None else damping,
    )
    LOGGER.info("Built route %s -> %s with %s points", origin.code, destination.code, len(path))
    return Route(origin=origin, destination=destination, path=path)


class RouteViewer:
    """Resolve routes and feed them to an animator."""

    def __init__(
        self,
        catalogue: AirportCatalogue,
        animator: PathAnimator,
        *,
        on_bounds: Optional[BoundsListener] = None,
        segments: Optional[int] = None,
        curvature: Optional[float] = None,
        damping: Optional[float] = None,
        padding: Optional[int | Sequence[int]] = None,
    ) -> None:
        settings = get_settings()
        self.catalogue = catalogue
        self.animator = animator
        self._on_bounds = on_bounds
        self.segments = settings.arc_segments if segments is None else segments
        self.curvature = settings.arc_curvature if curvature is None else curvature
        self.damping = settings.arc_damping if damping is None else damping
        self.padding = settings.viewport_padding if padding is None else padding
        self._bounds: Optional[Bounds] = None
        self._route: Optional[Route] = None

    @property
    def bounds(self) -> Optional[Bounds]:
        return self._bounds

    @property
    def route(self) -> Optional[Route]:
        return self._route

    def build_route(self, origin_code: str, destination_code: str) -> Optional[Route]:
        """Resolve both codes and synthesise the arc, or return ``None``."""

        return build_route(
            self.catalogue,
            origin_code,
            destination_code,
            segments=self.segments,
            curvature=self.curvature,
            damping=self.damping,
        )

    def show_route(self, origin_code: str, destination_code: str) -> Optional[Route]:
        """Build a route, publish its bounds once and start the animation."""

        route = self.build_route(origin_code, destination_code)
        if route is None:
            return None
        bounds = fit_bounds(route.path, self.padding)
        try:
            self.animator.load_path(route.path)
        except Exception:
            self._bounds = None
            self._route = None
            raise
        self._bounds = bounds
        self._route = route
        if self._on_bounds is not None:
            self._on_bounds(bounds)
        return route

    def close(self) -> None:
        self.animator.dispose()
