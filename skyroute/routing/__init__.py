"""Mini README: Route construction and display orchestration.

Exports the viewer that resolves airport codes, synthesises the arc, fits the
viewport once and hands the path to an animator.
"""

from .viewer import Route, RouteViewer, build_route

__all__ = ["Route", "RouteViewer", "build_route"]
