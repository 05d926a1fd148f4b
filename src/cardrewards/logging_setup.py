"""
Shared logging setup for applications embedding the engine.
"""

import logging
import sys

from cardrewards.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "cardrewards-console"


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger with a single stdout handler.

    Calling it again only updates the level.

    Args:
        level: Log level name ('DEBUG', 'INFO', ...). Defaults to settings.log_level.
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    handler = next((h for h in root_logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
    handler.setLevel(log_level)
