"""Mini README: Static airport lookup for route endpoints.

Structure:
    * Airport - dataclass describing a single airport and its demo fare.
    * AirportCatalogue - read-only code -> Airport mapping with case-insensitive
      resolution.
    * DEFAULT_AIRPORTS - demo table used by the CLI and HTTP interface.

Misses are reported as ``None`` from ``resolve``; callers decide whether that
is an error for their surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from ..errors import InvalidArgumentError
from ..geometry import Coordinate
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Airport:
    """Airport entry with its marker coordinate and the demo fare."""

    code: str
    name: str
    coordinate: Coordinate
    price: float = 0.0

    def __post_init__(self) -> None:
        code = self.code.strip().upper() if isinstance(self.code, str) else ""
        if not code:
            raise InvalidArgumentError("Airport code must be a non-empty string")
        if self.price < 0:
            raise InvalidArgumentError(f"Airport {code} has a negative price: {self.price}")
        object.__setattr__(self, "code", code)

    def as_dict(self) -> Dict[str, object]:
        return {
            "code": self.code,
            "name": self.name,
            "coordinate": list(self.coordinate.as_pair()),
            "price": self.price,
        }


DEFAULT_AIRPORTS = (
    Airport("SYD", "Sydney", Coordinate(-33.8688, 151.2093), 0),
    Airport("SIN", "Singapore", Coordinate(1.3521, 103.8198), 450),
    Airport("LAX", "Los Angeles", Coordinate(34.0522, -118.2437), 900),
    Airport("TYO", "Tokyo", Coordinate(35.6895, 139.6917), 700),
    Airport("DXB", "Dubai", Coordinate(25.276987, 55.296249), 600),
)


def _normalise(code: str) -> str:
    return code.strip().upper()


class AirportCatalogue:
    """Read-only mapping from airport code to :class:`Airport`."""

    def __init__(self, airports: Iterable[Airport]) -> None:
        self._airports: Dict[str, Airport] = {}
        for airport in airports:
            if airport.code in self._airports:
                raise InvalidArgumentError(f"Duplicate airport code '{airport.code}'")
            self._airports[airport.code] = airport
        LOGGER.debug("Airport catalogue initialised with %s entries", len(self._airports))

    @classmethod
    def default(cls) -> "AirportCatalogue":
        """Return the demo catalogue."""

        return cls(DEFAULT_AIRPORTS)

    def resolve(self, code: str) -> Optional[Airport]:
        """Return the airport for ``code`` or ``None`` when it is unknown."""

        if not isinstance(code, str):
            return None
        return self._airports.get(_normalise(code))

    def codes(self) -> List[str]:
        return list(self._airports)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and _normalise(code) in self._airports

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._airports.values())

    def __len__(self) -> int:
        return len(self._airports)
