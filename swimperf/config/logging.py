"""
Logging setup for applications embedding the engine.

The engine itself only creates module loggers; the application shell
decides where records go by calling configure_logging() once at startup.
"""

import logging
from typing import Optional

from .settings import get_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the level from settings unless one is given."""
    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(format=LOG_FORMAT, level=numeric_level)
    logging.getLogger("swimperf").setLevel(numeric_level)
