"""
Logging configuration helper.

Library modules only create loggers; the process-wide handler and level are
set up once here. Level comes from CRAZY_GENERICS_LOG_LEVEL (default INFO).
"""

from __future__ import annotations

import logging
import os
from typing import Final

LOG_LEVEL_ENV_VAR: Final[str] = "CRAZY_GENERICS_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging from the argument or the environment."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = (level_name or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
