"""Centralized logger configuration.

Usage:
    from corekit.common.logger import get_logger
    logger = get_logger(__name__)

The library itself never installs handlers; applications that want output
call `setup_logging()` once at startup.
"""

from __future__ import annotations

import logging
import os

ENV_LOG_LEVEL = "COREKIT_LOG_LEVEL"

DEFAULT_LEVEL = os.getenv(ENV_LOG_LEVEL, "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["ENV_LOG_LEVEL", "LOG_FORMAT", "get_logger", "setup_logging"]
