"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from skyroute import logging_utils
from skyroute.configuration import SkyrouteSettings, get_settings
from skyroute.logging_utils import configure_root_logger


def test_defaults_match_reference_behaviour(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TICK_INTERVAL_MS", "ARC_SEGMENTS", "ARC_CURVATURE", "ARC_DAMPING", "ENVIRONMENT"):
        monkeypatch.delenv(f"SKYROUTE_{name}", raising=False)

    settings = SkyrouteSettings(_env_file=None)

    assert settings.tick_interval_ms == 100
    assert settings.tick_interval_seconds == pytest.approx(0.1)
    assert settings.arc_segments == 200
    assert settings.arc_curvature == 10
    assert settings.arc_damping == pytest.approx(0.1)
    assert not settings.is_production


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYROUTE_TICK_INTERVAL_MS", "250")
    monkeypatch.setenv("SKYROUTE_ENVIRONMENT", "Production")
    monkeypatch.setenv("SKYROUTE_DEFAULT_ORIGIN", "lax")

    settings = SkyrouteSettings(_env_file=None)

    assert settings.tick_interval_ms == 250
    assert settings.is_production
    assert settings.default_origin == "LAX"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        SkyrouteSettings(_env_file=None, arc_segments=0)
    with pytest.raises(ValidationError):
        SkyrouteSettings(_env_file=None, tick_interval_ms=0)


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SkyrouteSettings(_env_file=None, log_level="chatty")


def test_root_logger_level_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYROUTE_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    try:
        root = configure_root_logger()
        again = configure_root_logger()

        assert root.level == logging.DEBUG
        assert sum(handler is logging_utils._ROOT_HANDLER for handler in again.handlers) == 1
        assert configure_root_logger("WARNING").level == logging.WARNING
    finally:
        monkeypatch.delenv("SKYROUTE_LOG_LEVEL")
        get_settings.cache_clear()
        configure_root_logger(logging.INFO)
