"""Mini README: Application-wide logging helpers for SkyRoute.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared stream handler once.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The root level comes
    from ``SKYROUTE_LOG_LEVEL`` unless a caller passes one explicitly. The
    handler is attached on first use only, so reloading modules under
    ``uvicorn --reload`` or repeated test imports never duplicates log lines.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .configuration import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str, None] = None) -> logging.Logger:
    """Attach the SkyRoute handler to the root logger and apply ``level``.

    Repeated calls only adjust the level; the handler is installed once.
    """

    global _ROOT_HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(get_settings().log_level if level is None else level)
    if _ROOT_HANDLER is None:
        _ROOT_HANDLER = logging.StreamHandler()
        _ROOT_HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(_ROOT_HANDLER)
    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, configuring the root logger on first use."""

    if _ROOT_HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
