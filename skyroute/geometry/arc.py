"""Mini README: Curved arc synthesis between two coordinates.

The arc is a straight latitude/longitude interpolation with a symmetric lift
added to latitude: ``sin(pi * t) * curvature * damping``. The lift vanishes at
both ends and peaks at the midpoint, giving the gentle bow used to draw flight
routes on a flat map. This is a visual device, not a great-circle track.
"""

from __future__ import annotations

import math
from typing import List

from ..errors import InvalidArgumentError
from .coordinates import Coordinate, Path

DEFAULT_CURVATURE = 10.0
DEFAULT_DAMPING = 0.1


def generate_arc(
    start: Coordinate,
    end: Coordinate,
    segments: int,
    *,
    curvature: float = DEFAULT_CURVATURE,
    damping: float = DEFAULT_DAMPING,
) -> Path:
    """Return ``segments + 1`` points bowing from ``start`` to ``end``.

    Raises:
        InvalidArgumentError: if ``segments`` is not an integer of at least 1.
    """

    if isinstance(segments, bool) or not isinstance(segments, int):
        raise InvalidArgumentError(f"Segment count must be an integer, got {segments!r}")
    if segments < 1:
        raise InvalidArgumentError(f"Segment count must be at least 1, got {segments}")

    lift = curvature * damping
    points: List[Coordinate] = []
    for index in range(segments + 1):
        t = index / segments
        lat = start.lat + (end.lat - start.lat) * t
        lon = start.lon + (end.lon - start.lon) * t
        points.append(Coordinate(lat=lat + math.sin(math.pi * t) * lift, lon=lon))

    # sin(pi) is ~1e-16, pin the endpoints to the caller's coordinates.
    points[0] = start
    points[-1] = end
    return tuple(points)
