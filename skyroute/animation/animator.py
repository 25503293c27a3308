"""Mini README: Path animator stepping a marker along a route.

Structure:
    * AnimationPhase - enum for the animator lifecycle (idle, running, completed).
    * AnimationState - explicit record of the current step, position and heading.
    * PathAnimator - arms a recurring timer and advances one point per tick.

Lifecycle:
    ``load_path`` cancels any outstanding timer, resets the state record and arms
    a fresh timer. Each tick advances exactly one index, computes the heading of
    the segment just travelled and pushes ``on_tick(position, heading)``. The
    tick that reaches the final point cancels the timer and pushes
    ``on_complete()``. ``dispose`` cancels unconditionally, so an instance never
    holds more than one armed timer. If ``on_tick`` raises, the run is aborted:
    the timer is cancelled, the state returns to idle, ``on_error(exc)`` is
    pushed and the exception propagates to the scheduler.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import partial
from typing import Callable, Iterable, Optional

from ..configuration import get_settings
from ..errors import InvalidArgumentError, StateError
from ..geometry import Coordinate, Path, bearing
from ..logging_utils import get_logger
from .scheduler import Scheduler, TimerHandle

LOGGER = get_logger(__name__)

TickListener = Callable[[Coordinate, float], None]
CompleteListener = Callable[[], None]
ErrorListener = Callable[[BaseException], None]


class AnimationPhase(str, Enum):
    """Lifecycle phases of a :class:`PathAnimator`."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(slots=True)
class AnimationState:
    """Mutable record owned by a single animator."""

    path: Path = ()
    current_index: int = 0
    position: Optional[Coordinate] = None
    heading: float = 0.0
    phase: AnimationPhase = AnimationPhase.IDLE

    @property
    def last_index(self) -> int:
        return len(self.path) - 1


class PathAnimator:
    """Step through a path on a fixed cadence, publishing position and heading."""

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        on_tick: Optional[TickListener] = None,
        on_complete: Optional[CompleteListener] = None,
        on_error: Optional[ErrorListener] = None,
        interval_ms: Optional[float] = None,
        strict: Optional[bool] = None,
    ) -> None:
        if interval_ms is None or strict is None:
            settings = get_settings()
            interval_ms = settings.tick_interval_ms if interval_ms is None else interval_ms
            strict = (not settings.is_production) if strict is None else strict
        if interval_ms <= 0:
            raise InvalidArgumentError(f"Tick interval must be positive, got {interval_ms}")
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._on_complete = on_complete
        self._on_error = on_error
        self.interval_ms = float(interval_ms)
        self.strict = strict
        self._state = AnimationState()
        self._timer: Optional[TimerHandle] = None
        LOGGER.debug(
            "Initialised PathAnimator with interval=%sms strict=%s", self.interval_ms, strict
        )

    @property
    def state(self) -> AnimationState:
        """Snapshot of the current state record."""

        return replace(self._state)

    @property
    def phase(self) -> AnimationPhase:
        return self._state.phase

    @property
    def timer_armed(self) -> bool:
        return self._timer is not None and self._timer.active

    def load_path(self, path: Iterable[Coordinate]) -> None:
        """Start animating ``path`` from its first point, replacing any prior run."""

        self.cancel()
        points = tuple(path)
        if not points:
            self._state = AnimationState()
            raise InvalidArgumentError("Cannot animate an empty path")

        state = AnimationState(
            path=points,
            current_index=0,
            position=points[0],
            heading=0.0,
            phase=AnimationPhase.RUNNING,
        )
        try:
            timer = self._scheduler.call_every(
                self.interval_ms / 1000.0, partial(self._tick, state)
            )
        except Exception:
            self._state = AnimationState()
            raise
        self._state = state
        self._timer = timer
        LOGGER.debug("Armed animation timer for path of %s points", len(points))

    def cancel(self) -> None:
        """Release the armed timer, if any."""

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            LOGGER.debug("Cancelled animation timer")

    def dispose(self) -> None:
        """Cancel the timer and drop the current path."""

        self.cancel()
        self._state = AnimationState()

    def __enter__(self) -> "PathAnimator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def _tick(self, state: AnimationState) -> None:
        if state is not self._state:
            self._invariant_violation("Tick received for a superseded path")
            return
        if state.phase is not AnimationPhase.RUNNING:
            self._invariant_violation(f"Tick received while {state.phase.value}")
            return

        if state.current_index < state.last_index:
            previous = state.path[state.current_index]
            state.current_index += 1
            state.position = state.path[state.current_index]
            state.heading = bearing(previous, state.position)
            LOGGER.debug(
                "Step %s/%s heading %.2f", state.current_index, state.last_index, state.heading
            )
            if self._on_tick is not None:
                try:
                    self._on_tick(state.position, state.heading)
                except Exception as error:
                    self._abort(state, error)
                    raise
            if state is not self._state:
                # on_tick loaded a new path
                return

        if state.current_index == state.last_index:
            self._complete(state)

    def _complete(self, state: AnimationState) -> None:
        self.cancel()
        state.phase = AnimationPhase.COMPLETED
        LOGGER.info("Animation completed after %s steps", state.last_index)
        if self._on_complete is not None:
            self._on_complete()

    def _abort(self, state: AnimationState, error: BaseException) -> None:
        if state is not self._state:
            return
        self.cancel()
        self._state = AnimationState()
        LOGGER.error("Animation aborted at step %s: %s", state.current_index, error)
        if self._on_error is not None:
            self._on_error(error)

    def _invariant_violation(self, message: str) -> None:
        if self.strict:
            raise StateError(message)
        LOGGER.warning("Ignoring animator invariant violation: %s", message)
