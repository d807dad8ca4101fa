"""
Logging setup for the order placement backend
"""
import logging
from typing import Optional

from orderdesk.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )

    # Suppress noisy library loggers
    logging.getLogger("psycopg2").setLevel(logging.WARNING)
