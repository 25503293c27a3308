"""Mini README: Coordinate value type shared by every SkyRoute component.

Structure:
    * Coordinate - immutable latitude/longitude pair in decimal degrees.
    * Path - alias for the ordered tuple of coordinates an arc produces.

Coordinates validate on construction so malformed values (strings that are not
numbers, NaN, infinity) are rejected at the boundary rather than surfacing as
NaN headings deep inside an animation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import InvalidArgumentError


def _as_degrees(value: object, label: str) -> float:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}") from error
    if not math.isfinite(number):
        raise InvalidArgumentError(f"{label} must be finite, got {value!r}")
    return number


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lat", _as_degrees(self.lat, "Latitude"))
        object.__setattr__(self, "lon", _as_degrees(self.lon, "Longitude"))

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Coordinate":
        """Build a coordinate from a ``[lat, lon]`` pair."""

        if len(pair) != 2:
            raise InvalidArgumentError("Coordinate pairs must be (lat, lon)")
        return cls(lat=pair[0], lon=pair[1])

    def as_pair(self) -> Tuple[float, float]:
        return (self.lat, self.lon)


Path = Tuple[Coordinate, ...]
