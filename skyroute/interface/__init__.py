"""Mini README: Interactive interfaces (HTTP) for SkyRoute.

Exports the FastAPI application factory that serves airports, route arcs and
precomputed animation frames to a map front end.
"""

from .web_app import create_application

__all__ = ["create_application"]
