"""Mini README: Core package initializer for the SkyRoute route visualiser.

The package bundles the geometry helpers (arc synthesis, bearings, viewport
fitting), the timed path animator, and the glue that turns two airport codes
into an animated route. Heavy interface dependencies live in
``skyroute.interface`` so the core can be imported without FastAPI.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
