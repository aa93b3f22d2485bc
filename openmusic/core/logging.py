# ============================================================================
# FILE: openmusic/core/logging.py
# ============================================================================
import logging
from typing import Optional
from openmusic.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the whole application"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQL echo is controlled by DEBUG, keep the engine logger quiet otherwise
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
