"""Mini README: Initial bearing between two coordinates.

The heading is the forward azimuth in degrees clockwise from north, normalised
to ``[0, 360)``. Identical points have no defined direction; they report 0
degrees so renderers never receive NaN.
"""

from __future__ import annotations

import math

from .coordinates import Coordinate


def bearing(start: Coordinate, end: Coordinate) -> float:
    """Return the heading from ``start`` to ``end`` in degrees."""

    if start == end:
        return 0.0
    lat1, lon1 = math.radians(start.lat), math.radians(start.lon)
    lat2, lon2 = math.radians(end.lat), math.radians(end.lon)
    d_lon = lon2 - lon1
    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    heading = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # -1e-15 + 360 rounds to 360.0
    return 0.0 if heading >= 360.0 else heading
