"""Mini README: Pure geometry helpers for route visualisation.

Exports the coordinate value type together with the three pure functions the
viewer relies on: arc synthesis, bearing computation and viewport fitting.
None of these helpers keep state or log per call; they are safe to use from
any interface layer.
"""

from .arc import generate_arc
from .bearing import bearing
from .coordinates import Coordinate, Path
from .viewport import Bounds, fit_bounds

__all__ = ["Bounds", "Coordinate", "Path", "bearing", "fit_bounds", "generate_arc"]
