"""
Logging setup.

Every module gets its logger through setup_logger(__name__) so handlers and
formatting stay consistent across the package.
"""

import logging
import sys
from typing import Optional

from buildtrack.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Create (or fetch) a configured logger.

    Args:
        name: Logger name, usually the module's __name__
        level: Log level override (defaults to LOG_LEVEL from settings)

    Returns:
        Logger with a single stderr stream handler attached
    """
    logger = logging.getLogger(name)
    logger.setLevel(level or get_settings().LOG_LEVEL)

    # Avoid stacking handlers when a module is re-imported
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
