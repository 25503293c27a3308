"""Mini README: Centralised configuration models and helpers for SkyRoute.

Structure:
    * SkyrouteSettings - Pydantic settings model for animation, geometry and
      service options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SKYROUTE_*`` environment variables (or a
    local ``.env`` file). Every tunable the route viewer uses, from the tick
    cadence to the arc curvature, can be overridden this way or passed
    explicitly by callers.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SkyrouteSettings(BaseSettings):
    """Runtime configuration for the SkyRoute viewer."""

    model_config = SettingsConfigDict(
        env_prefix="SKYROUTE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label; 'production' relaxes animator invariant checks.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    tick_interval_ms: float = Field(
        100.0,
        description="Delay between animation steps in milliseconds.",
        gt=0,
    )
    arc_segments: int = Field(
        200,
        description="Number of segments used when synthesising a route arc.",
        ge=1,
    )
    arc_curvature: float = Field(
        10.0,
        description="Peak lift constant applied to the arc midpoint.",
    )
    arc_damping: float = Field(
        0.1,
        description="Scale factor applied to the lift before it is added to latitude.",
    )
    viewport_padding: int = Field(
        50,
        description="Pixel padding the renderer should keep around fitted bounds.",
        ge=0,
    )
    default_origin: str = Field("SYD", description="Origin code used when none is given.")
    default_destination: str = Field(
        "SIN", description="Destination code used when none is given."
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("default_origin", "default_destination")
    @classmethod
    def _normalise_code(cls, value: str) -> str:
        """Airport codes are matched upper-case, mirror that for defaults."""

        return value.strip().upper()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"production", "prod"}

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0


@lru_cache()
def get_settings() -> SkyrouteSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SkyrouteSettings()
