# logging_config.py - loguru sinks

import os
import sys

from loguru import logger

from config import Settings


def configure_logging(settings: Settings) -> None:
    # Clear default handlers
    logger.remove()

    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(
            settings.log_file,
            rotation="1 MB",
            retention="7 days",
            enqueue=True,
            level=settings.log_level,
        )
