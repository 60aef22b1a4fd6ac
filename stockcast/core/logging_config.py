"""
Logging setup for processes hosting the engine.

The library modules only create module-level loggers; handlers are
configured by the host (or by calling configure_logging once at startup).
"""

import logging
from typing import Optional

from stockcast.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging using the engine's log level setting."""
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("stockcast").setLevel(log_level)
