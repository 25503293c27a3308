"""Mini README: Timed animation of a marker along a path.

Re-exports the path animator and the scheduler abstractions it arms. The
``scheduler`` module holds the timer backends (asyncio for live use, a manual
clock for deterministic stepping); ``animator`` holds the state machine.
"""

from .animator import AnimationPhase, AnimationState, PathAnimator
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TimerHandle

__all__ = [
    "AnimationPhase",
    "AnimationState",
    "AsyncioScheduler",
    "ManualScheduler",
    "PathAnimator",
    "Scheduler",
    "TimerHandle",
]
