"""Mini README: Airport lookup table used to resolve route endpoints.

The catalogue is read-only once built and shared by every component that needs
to turn a code such as ``SYD`` into a coordinate.
"""

from .catalogue import Airport, AirportCatalogue

__all__ = ["Airport", "AirportCatalogue"]
