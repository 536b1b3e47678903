"""
Logging setup

loguru ships with a DEBUG-level stderr sink; hosts call configure_logging()
once at startup to apply the configured level.
"""
import sys
from typing import Optional

from loguru import logger

from .config import settings


def configure_logging(level: Optional[str] = None) -> int:
    """Replace loguru's default sink with one at the configured level.

    Returns the id of the new sink.
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )
