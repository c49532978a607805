"""Process-wide logging setup for the kiosk."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging() -> int:
    """basicConfig at LOG_LEVEL (default INFO). An unknown level name falls back to INFO with a warning."""
    raw = os.environ.get("LOG_LEVEL", "").strip()
    level = logging.getLevelName(raw.upper()) if raw else logging.INFO
    known = isinstance(level, int)
    if not known:
        level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=level)
    if not known:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", raw)
    return level
