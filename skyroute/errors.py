"""Mini README: Exception types shared across the SkyRoute core.

Structure:
    * InvalidArgumentError - bad geometry input (segments, coordinates, padding).
    * StateError - animator timer invariant violations.

Unknown airport codes are deliberately absent here: lookups report a miss by
returning ``None`` and callers decide how to surface it.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised synchronously when a caller supplies malformed input."""


class StateError(RuntimeError):
    """Raised when the animator observes a tick it should never receive."""
