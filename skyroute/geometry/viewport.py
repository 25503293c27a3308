"""Mini README: Viewport fitting for generated paths.

Structure:
    * Bounds - geographic envelope of a path plus the renderer padding.
    * fit_bounds - computes the envelope once per path.

The padding is expressed in renderer units (pixels) and is only carried along;
the map surface applies it when zooming to the envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import InvalidArgumentError
from .coordinates import Coordinate

DEFAULT_PADDING = (50, 50)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Latitude/longitude envelope with renderer padding."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    padding: Tuple[int, int] = DEFAULT_PADDING

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            lat=(self.min_lat + self.max_lat) / 2.0,
            lon=(self.min_lon + self.max_lon) / 2.0,
        )

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.min_lat <= coordinate.lat <= self.max_lat
            and self.min_lon <= coordinate.lon <= self.max_lon
        )

    def as_corners(self) -> List[List[float]]:
        """Return ``[[south, west], [north, east]]`` as map renderers expect."""

        return [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]]


def _normalise_padding(padding: int | Sequence[int]) -> Tuple[int, int]:
    if isinstance(padding, (int, float)):
        values = (padding, padding)
    else:
        values = tuple(padding)
    if len(values) != 2:
        raise InvalidArgumentError("Padding must be a single value or an (x, y) pair")
    if any(value < 0 for value in values):
        raise InvalidArgumentError(f"Padding must be non-negative, got {padding!r}")
    return (int(values[0]), int(values[1]))


def fit_bounds(path: Sequence[Coordinate], padding: int | Sequence[int] = DEFAULT_PADDING) -> Bounds:
    """Compute the envelope of ``path``; an empty path is rejected."""

    if not path:
        raise InvalidArgumentError("Cannot fit bounds to an empty path")
    lats = [point.lat for point in path]
    lons = [point.lon for point in path]
    return Bounds(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
        padding=_normalise_padding(padding),
    )
